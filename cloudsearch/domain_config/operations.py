from __future__ import annotations

from typing import Any

from cloudsearch.core import API_VERSION, HTTPMethod, Operation, RequestType
from cloudsearch.core.exceptions import BadRequestError

from ._actions import ACTIONS
from ._helper import camelize, flatten, is_empty, names
from ._models import IndexField


def build_config_operation(
    action: str,
    domain_name: str | None,
    params: dict[str, Any] | None = None,
    options: dict[str, Any] | None = None,
) -> Operation:
    """Create a configuration operation.

    Args:
        action:
            Action name in snake case, e.g. "define_suggester".
        domain_name:
            Domain name, None for account-level actions.
        params:
            Action parameters.
        options:
            Caller options: http_method, path, api_version.

    Returns:
        Configuration operation.
    """
    options = options or dict()
    merged = dict(params or dict())
    merged.update(
        {
            "Action": camelize(action),
            "DomainName": domain_name,
            "Version": options.get("api_version", API_VERSION),
        }
    )
    merged = {k: v for k, v in merged.items() if not is_empty(v)}
    http_method = options.get("http_method", HTTPMethod.GET)
    return Operation(
        request_type=RequestType.CONFIG,
        http_method=HTTPMethod(http_method.lower()),
        path=options.get("path", "/"),
        params=flatten(merged),
        api_version=options.get("api_version", API_VERSION),
    )


def request(
    action: str,
    domain_name: str | None = None,
    *args: Any,
    **options: Any,
) -> Operation:
    """Create a configuration operation for an action in the table.

    Args:
        action:
            Action name in snake case.
        domain_name:
            Domain name, ignored by account-level actions.
        args:
            Positional action parameters.
        options:
            Caller options: http_method, path, api_version, and,
            depending on the action, deployed and names.

    Returns:
        Configuration operation.

    Raises:
        BadRequestError:
            Unknown action or wrong number of parameters.
    """
    if action not in ACTIONS:
        raise BadRequestError(f"Unknown CloudSearch action {action}.")
    definition = ACTIONS[action]
    if len(args) != len(definition.params):
        raise BadRequestError(
            f"{action} expects {len(definition.params)} parameter(s), "
            f"got {len(args)}."
        )
    params: dict[str, Any] = dict()
    for param, value in zip(definition.params, args):
        params[param.name] = param.convert(value) if param.convert else value
    if definition.deployed:
        params["Deployed"] = options.get("deployed")
    if definition.names is not None:
        params.update(names(definition.names, options.get("names")))
    if definition.post:
        options["http_method"] = HTTPMethod.POST
    if not definition.domain:
        domain_name = None
    return build_config_operation(action, domain_name, params, options)


def create_domain(domain_name: str, **options: Any) -> Operation:
    return request("create_domain", domain_name, **options)


def delete_domain(domain_name: str, **options: Any) -> Operation:
    return request("delete_domain", domain_name, **options)


def describe_domains(**options: Any) -> Operation:
    """Describe domains, all of them or those listed in "names"."""
    return request("describe_domains", None, **options)


def list_domain_names(**options: Any) -> Operation:
    return request("list_domain_names", None, **options)


def index_documents(domain_name: str, **options: Any) -> Operation:
    """Rebuild the domain index with the latest configuration."""
    return request("index_documents", domain_name, **options)


def build_suggesters(domain_name: str, **options: Any) -> Operation:
    return request("build_suggesters", domain_name, **options)


def define_suggester(
    domain_name: str,
    suggester: dict[str, Any],
    **options: Any,
) -> Operation:
    """Define a suggester.

    Args:
        domain_name:
            Domain name.
        suggester:
            Suggester definition, e.g. {"SuggesterName": "title",
            "DocumentSuggesterOptions": {"SourceField": "title"}}.

    Returns:
        Configuration operation.
    """
    return request("define_suggester", domain_name, suggester, **options)


def delete_suggester(domain_name: str, name: str, **options: Any) -> Operation:
    return request("delete_suggester", domain_name, name, **options)


def describe_suggesters(domain_name: str, **options: Any) -> Operation:
    return request("describe_suggesters", domain_name, **options)


def define_analysis_scheme(
    domain_name: str,
    scheme: dict[str, Any],
    **options: Any,
) -> Operation:
    return request("define_analysis_scheme", domain_name, scheme, **options)


def delete_analysis_scheme(
    domain_name: str,
    name: str,
    **options: Any,
) -> Operation:
    return request("delete_analysis_scheme", domain_name, name, **options)


def describe_analysis_schemes(domain_name: str, **options: Any) -> Operation:
    return request("describe_analysis_schemes", domain_name, **options)


def describe_availability_options(
    domain_name: str,
    **options: Any,
) -> Operation:
    return request("describe_availability_options", domain_name, **options)


def update_availability_options(
    domain_name: str,
    multi_az: bool,
    **options: Any,
) -> Operation:
    """Enable or disable Multi-AZ for the domain."""
    return request(
        "update_availability_options", domain_name, multi_az, **options
    )


def describe_scaling_parameters(domain_name: str, **options: Any) -> Operation:
    return request("describe_scaling_parameters", domain_name, **options)


def update_scaling_parameters(
    domain_name: str,
    scaling: dict[str, Any],
    **options: Any,
) -> Operation:
    """Update scaling parameters.

    Args:
        domain_name:
            Domain name.
        scaling:
            Scaling parameters, e.g. {"DesiredInstanceType":
            "search.small", "DesiredReplicationCount": 2}.

    Returns:
        Configuration operation.
    """
    return request(
        "update_scaling_parameters", domain_name, scaling, **options
    )


def describe_service_access_policies(
    domain_name: str,
    **options: Any,
) -> Operation:
    return request(
        "describe_service_access_policies", domain_name, **options
    )


def update_service_access_policies(
    domain_name: str,
    policies: str | dict[str, Any],
    **options: Any,
) -> Operation:
    """Update access policies.

    Args:
        domain_name:
            Domain name.
        policies:
            Policy document, as JSON text or a mapping.

    Returns:
        Configuration operation.
    """
    return request(
        "update_service_access_policies", domain_name, policies, **options
    )


def define_expression(
    domain_name: str,
    name: str,
    value: str,
    **options: Any,
) -> Operation:
    return request("define_expression", domain_name, name, value, **options)


def delete_expression(
    domain_name: str,
    name: str,
    **options: Any,
) -> Operation:
    return request("delete_expression", domain_name, name, **options)


def describe_expressions(domain_name: str, **options: Any) -> Operation:
    return request("describe_expressions", domain_name, **options)


def define_index_field(
    domain_name: str,
    index_field: IndexField | dict[str, Any],
    **options: Any,
) -> Operation:
    """Define an index field.

    Args:
        domain_name:
            Domain name.
        index_field:
            Index field definition, an IndexField or the native
            mapping ({"IndexFieldName": ..., "IndexFieldType": ...}).

    Returns:
        Configuration operation.
    """
    return request("define_index_field", domain_name, index_field, **options)


def delete_index_field(
    domain_name: str,
    name: str,
    **options: Any,
) -> Operation:
    return request("delete_index_field", domain_name, name, **options)


def describe_index_fields(domain_name: str, **options: Any) -> Operation:
    return request("describe_index_fields", domain_name, **options)
