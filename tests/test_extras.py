from route2swagger import routing as slx
from route2swagger.converter.extras import get_extras
from route2swagger.swagger import annotations as swg


class TestGetExtras:
    def test_defaults(self):
        extras = get_extras(slx.Route(slx.Request(uri="x")))
        assert extras.requirements == {}
        assert extras.schemes == []
        assert extras.bind is None
        assert extras.properties == {}

    def test_requirements_from_modifier(self):
        route = slx.Route(slx.Modifier(method="addRequirements", args=[{"id": "[0-9]+"}]))
        assert get_extras(route).requirements == {"id": "[0-9]+"}

    def test_requirement_patterns_coerced_to_strings(self):
        route = slx.Route(slx.Modifier(method="addRequirements", args=[{"id": 5}]))
        assert get_extras(route).requirements == {"id": "5"}

    def test_last_requirements_modifier_wins(self):
        route = slx.Route(
            slx.Modifier(method="addRequirements", args=[{"id": "[0-9]+"}]),
            slx.Modifier(method="addRequirements", args=[{"slug": "[a-z]+"}]),
        )
        assert get_extras(route).requirements == {"slug": "[a-z]+"}

    def test_other_modifiers_ignored(self):
        route = slx.Route(slx.Modifier(method="setHost", args=["example.com"]))
        assert get_extras(route).requirements == {}

    def test_schemes_in_declaration_order(self):
        route = slx.Route(slx.RequireHttps(), slx.RequireHttp())
        assert get_extras(route).schemes == ["https", "http"]

    def test_bind(self):
        route = slx.Route(slx.Bind(route_name="first"), slx.Bind(route_name="second"))
        assert get_extras(route).bind == "second"

    def test_request_root(self):
        request = slx.Request(slx.RequireHttps(), method="GET", uri="x")
        assert get_extras(request).schemes == ["https"]

    def test_only_one_level_is_inspected(self):
        route = slx.Route(slx.Request(slx.RequireHttps(), uri="x"))
        assert get_extras(route).schemes == []

    def test_unsupported_root_returns_defaults(self):
        extras = get_extras(swg.Get(path="/x"))
        assert extras.schemes == []
        assert extras.bind is None
