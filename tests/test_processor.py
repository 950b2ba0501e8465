from route2swagger import routing as slx
from route2swagger.context import Context
from route2swagger.converter.analysis import ROUTING_NAMESPACE, RoutingAnalysis
from route2swagger.converter.custom import CustomAnnotation
from route2swagger.converter.processor import CustomAnnotations
from route2swagger.swagger import annotations as swg
from route2swagger.swagger.analysis import SWAGGER_NAMESPACE

CLASS_CONTEXT = Context(filename="controllers.py", module="controllers", class_name="PrefixController")
METHOD_CONTEXT = CLASS_CONTEXT.model_copy(update={"method": "get_request"})


def _operations(analysis: RoutingAnalysis) -> list[swg.Operation]:
    return analysis.get_annotations_of_type(swg.Operation)


def _migrate(analysis: RoutingAnalysis) -> None:
    analysis.processors[0](analysis)


class TestRoutingAnalysis:
    def test_custom_processor_runs_first(self):
        analysis = RoutingAnalysis()
        assert isinstance(analysis.processors[0], CustomAnnotations)
        assert len(analysis.processors) > 1

    def test_namespaces(self):
        analysis = RoutingAnalysis(namespaces=["myapp.annotations"])
        assert analysis.namespaces == (SWAGGER_NAMESPACE, ROUTING_NAMESPACE, "myapp.annotations")

    def test_non_native_annotations_are_wrapped(self):
        analysis = RoutingAnalysis()
        route = slx.Route(slx.Request(uri="get"))
        analysis.add_annotation(route, METHOD_CONTEXT, handle=3)
        [custom] = list(analysis.annotations)
        assert isinstance(custom, CustomAnnotation)
        assert custom.get_annotation() is route
        assert custom.context == METHOD_CONTEXT
        assert custom.handle == 3

    def test_native_annotations_kept(self):
        analysis = RoutingAnalysis()
        definition = swg.Definition(definition="jsonError")
        analysis.add_annotation(definition, CLASS_CONTEXT, handle=1)
        assert list(analysis.annotations) == [definition]
        assert definition.context == CLASS_CONTEXT


class TestCustomAnnotations:
    def test_wrappers_replaced_by_operations(self):
        analysis = RoutingAnalysis(processors=[])
        analysis.add_annotation(slx.Route(slx.Request(method="GET|POST", uri="get")), METHOD_CONTEXT, handle=1)
        _migrate(analysis)
        assert not analysis.get_annotations_of_type(CustomAnnotation)
        assert [op.method for op in _operations(analysis)] == ["get", "post"]

    def test_duplicate_registration_migrated_once(self):
        analysis = RoutingAnalysis(processors=[])
        route = slx.Route(slx.Request(uri="get"))
        analysis.add_annotation(route, METHOD_CONTEXT, handle=1)
        analysis.add_annotation(route, METHOD_CONTEXT, handle=1)
        _migrate(analysis)
        _migrate(analysis)
        assert len(_operations(analysis)) == 1
        assert not analysis.get_annotations_of_type(CustomAnnotation)

    def test_prefix_applied_regardless_of_discovery_order(self):
        analysis = RoutingAnalysis(processors=[])
        analysis.add_annotation(slx.Route(slx.Request(uri="get")), METHOD_CONTEXT, handle=1)
        analysis.add_annotation(slx.Controller(prefix="/silex"), CLASS_CONTEXT, handle=2)
        _migrate(analysis)
        assert [op.path for op in _operations(analysis)] == ["/silex/get"]

    def test_unknown_annotations_removed(self):
        analysis = RoutingAnalysis(processors=[])
        analysis.add_annotation(object(), METHOD_CONTEXT, handle=1)
        _migrate(analysis)
        assert len(analysis.annotations) == 0

    def test_process_builds_document(self):
        analysis = RoutingAnalysis()
        analysis.add_annotation(
            slx.Route(slx.Request(uri="get"), swg.Response(response=200, description="GET")),
            METHOD_CONTEXT,
            handle=1,
        )
        analysis.add_annotation(slx.Controller(prefix="/silex"), CLASS_CONTEXT, handle=2)
        swagger = analysis.process()
        assert list(swagger.paths) == ["/silex/get"]
        assert swagger.paths["/silex/get"]["get"].operation_id == "get_request"
