from ..core.exceptions import BadRequestError
from ._models import IndexField, IndexFieldOptions, IndexFieldType
from .operations import (
    build_config_operation,
    build_suggesters,
    create_domain,
    define_analysis_scheme,
    define_expression,
    define_index_field,
    define_suggester,
    delete_analysis_scheme,
    delete_domain,
    delete_expression,
    delete_index_field,
    delete_suggester,
    describe_analysis_schemes,
    describe_availability_options,
    describe_domains,
    describe_expressions,
    describe_index_fields,
    describe_scaling_parameters,
    describe_service_access_policies,
    describe_suggesters,
    index_documents,
    list_domain_names,
    request,
    update_availability_options,
    update_scaling_parameters,
    update_service_access_policies,
)

__all__ = [
    "BadRequestError",
    "IndexField",
    "IndexFieldOptions",
    "IndexFieldType",
    "build_config_operation",
    "build_suggesters",
    "create_domain",
    "define_analysis_scheme",
    "define_expression",
    "define_index_field",
    "define_suggester",
    "delete_analysis_scheme",
    "delete_domain",
    "delete_expression",
    "delete_index_field",
    "delete_suggester",
    "describe_analysis_schemes",
    "describe_availability_options",
    "describe_domains",
    "describe_expressions",
    "describe_index_fields",
    "describe_scaling_parameters",
    "describe_service_access_policies",
    "describe_suggesters",
    "index_documents",
    "list_domain_names",
    "request",
    "update_availability_options",
    "update_scaling_parameters",
    "update_service_access_policies",
]
