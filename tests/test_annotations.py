from route2swagger import routing as slx
from route2swagger.swagger import annotations as swg


class TestNesting:
    def test_positional_annotations_grouped_by_nest_key(self):
        route = slx.Route(
            slx.Request(method="GET", uri="a"),
            swg.Response(response=200, description="ok"),
            slx.RequireHttps(),
        )
        assert [r.uri for r in route.request] == ["a"]
        assert route.responses[0].description == "ok"
        assert isinstance(route.require_https[0], slx.RequireHttps)

    def test_single_valued_field_keeps_instance(self):
        swagger = swg.Swagger(swg.Info(title="T", version="1"))
        assert swagger.info.title == "T"

    def test_aliased_single_valued_field(self):
        response = swg.Response(swg.Schema(ref="#/definitions/jsonError"), response=400)
        assert response.schema_.ref == "#/definitions/jsonError"

    def test_keyword_and_positional_nesting_combine(self):
        operation = swg.Get(swg.Parameter(name="b"), parameters=[swg.Parameter(name="a")], path="/x")
        assert [p.name for p in operation.parameters] == ["a", "b"]

    def test_annotation_is_noop_decorator(self):
        def handler():
            return None

        assert slx.Route(slx.Request(uri="x"))(handler) is handler

    def test_camel_case_and_snake_case_names(self):
        assert slx.Bind(routeName="a").route_name == "a"
        assert slx.Bind(route_name="b").route_name == "b"

    def test_optional_list_field_collects_nested(self):
        operation = swg.Get(swg.Tag(name="widgets"), swg.Tag(name="admin"), path="/x")
        assert operation.tags == ["widgets", "admin"]
        assert operation.to_dict()["tags"] == ["widgets", "admin"]

    def test_iteration_includes_extra_properties(self):
        route = slx.Route(slx.Bind(route_name="x"))
        assert "bind" in dict(route)
        assert "request" in dict(route)


class TestExport:
    def test_operation_to_dict(self):
        operation = swg.Get(
            path="/x/{id}",
            operation_id="show",
            parameters=[swg.Parameter(parameter="id", name="id", in_="path", required=True, type="string")],
            responses=[swg.Response(response=200, description="ok")],
        )
        assert operation.to_dict() == {
            "operationId": "show",
            "parameters": [{"name": "id", "in": "path", "required": True, "type": "string"}],
            "responses": {"200": {"description": "ok"}},
        }

    def test_swagger_to_dict(self):
        swagger = swg.Swagger(
            swg.Info(title="T", version="1.0.0"),
            swg.Definition(swg.Property(property="code", type="string"), definition="jsonError"),
            base_path="/",
        )
        data = swagger.to_dict()
        assert data["swagger"] == "2.0"
        assert data["basePath"] == "/"
        assert data["info"] == {"title": "T", "version": "1.0.0"}
        assert data["definitions"] == {"jsonError": {"properties": {"code": {"type": "string"}}}}
        assert data["paths"] == {}

    def test_response_schema_ref(self):
        response = swg.Response(swg.Schema(ref="#/definitions/jsonError"), response=400, description="bad")
        assert response.to_dict() == {"description": "bad", "schema": {"$ref": "#/definitions/jsonError"}}

    def test_extra_properties_are_exported(self):
        operation = swg.Get(path="/x", **{"x-internal": True})
        assert operation.to_dict()["x-internal"] is True

    def test_operations_table(self):
        assert set(swg.OPERATIONS) == {"get", "post", "put", "delete", "options", "head", "patch"}
        assert swg.OPERATIONS["patch"] is swg.Patch
