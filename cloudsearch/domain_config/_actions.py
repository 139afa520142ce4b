from __future__ import annotations

from typing import Any, Callable, NamedTuple

from ._helper import to_bool, to_index_field, to_policies


class Param(NamedTuple):
    name: str
    convert: Callable[[Any], Any] | None = None


class Action(NamedTuple):
    """Configuration action definition.

    Attributes:
        params: Positional parameters, in call order.
        domain: Whether the action targets a single domain.
        deployed: Whether the action reads the "deployed" option.
        names: Base name for the "names" option, if supported.
        post: Whether the action is always sent with POST.
    """

    params: tuple[Param, ...] = ()
    domain: bool = True
    deployed: bool = False
    names: str | None = None
    post: bool = False


ACTIONS: dict[str, Action] = {
    "create_domain": Action(),
    "delete_domain": Action(),
    "describe_domains": Action(domain=False, names="DomainNames", post=True),
    "list_domain_names": Action(domain=False),
    "index_documents": Action(),
    "build_suggesters": Action(),
    "define_suggester": Action(params=(Param("Suggester"),)),
    "delete_suggester": Action(params=(Param("SuggesterName"),)),
    "describe_suggesters": Action(
        deployed=True, names="SuggesterNames", post=True
    ),
    "define_analysis_scheme": Action(params=(Param("AnalysisScheme"),)),
    "delete_analysis_scheme": Action(params=(Param("AnalysisSchemeName"),)),
    "describe_analysis_schemes": Action(
        deployed=True, names="AnalysisSchemeNames", post=True
    ),
    "describe_availability_options": Action(deployed=True),
    "update_availability_options": Action(
        params=(Param("MultiAZ", to_bool),), post=True
    ),
    "describe_scaling_parameters": Action(),
    "update_scaling_parameters": Action(
        params=(Param("ScalingParameters"),), post=True
    ),
    "describe_service_access_policies": Action(deployed=True),
    "update_service_access_policies": Action(
        params=(Param("AccessPolicies", to_policies),), post=True
    ),
    "define_expression": Action(
        params=(
            Param("Expression.ExpressionName"),
            Param("Expression.ExpressionValue"),
        )
    ),
    "delete_expression": Action(params=(Param("ExpressionName"),)),
    "describe_expressions": Action(
        deployed=True, names="ExpressionNames", post=True
    ),
    "define_index_field": Action(
        params=(Param("IndexField", to_index_field),)
    ),
    "delete_index_field": Action(params=(Param("IndexFieldName"),)),
    "describe_index_fields": Action(
        deployed=True, names="FieldNames", post=True
    ),
}
