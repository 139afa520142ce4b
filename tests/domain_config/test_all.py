# type: ignore

import pytest

from cloudsearch.core import HTTPMethod, JSONParam, RequestType
from cloudsearch.domain_config import (
    BadRequestError,
    IndexField,
    IndexFieldOptions,
    IndexFieldType,
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


def test_build_config_operation():
    operation = build_config_operation(
        "index_documents", "movies", {"Extra": "", "Other": []}
    )
    assert operation.request_type == RequestType.CONFIG
    assert operation.http_method == HTTPMethod.GET
    assert operation.path == "/"
    assert operation.params == {
        "Action": "IndexDocuments",
        "DomainName": "movies",
        "Version": "2013-01-01",
    }

    operation = build_config_operation(
        "list_domain_names",
        None,
        options={"http_method": "POST", "path": "/admin"},
    )
    assert operation.http_method == HTTPMethod.POST
    assert operation.path == "/admin"
    assert operation.params == {
        "Action": "ListDomainNames",
        "Version": "2013-01-01",
    }


@pytest.mark.parametrize(
    "operation, action, method",
    [
        (create_domain("movies"), "CreateDomain", HTTPMethod.GET),
        (delete_domain("movies"), "DeleteDomain", HTTPMethod.GET),
        (index_documents("movies"), "IndexDocuments", HTTPMethod.GET),
        (build_suggesters("movies"), "BuildSuggesters", HTTPMethod.GET),
        (
            describe_scaling_parameters("movies"),
            "DescribeScalingParameters",
            HTTPMethod.GET,
        ),
        (
            describe_availability_options("movies"),
            "DescribeAvailabilityOptions",
            HTTPMethod.GET,
        ),
        (
            describe_service_access_policies("movies"),
            "DescribeServiceAccessPolicies",
            HTTPMethod.GET,
        ),
        (describe_suggesters("movies"), "DescribeSuggesters", HTTPMethod.POST),
        (
            describe_analysis_schemes("movies"),
            "DescribeAnalysisSchemes",
            HTTPMethod.POST,
        ),
        (
            describe_expressions("movies"),
            "DescribeExpressions",
            HTTPMethod.POST,
        ),
        (
            describe_index_fields("movies"),
            "DescribeIndexFields",
            HTTPMethod.POST,
        ),
    ],
)
def test_domain_actions(operation, action, method):
    assert operation.request_type == RequestType.CONFIG
    assert operation.http_method == method
    assert operation.params == {
        "Action": action,
        "DomainName": "movies",
        "Version": "2013-01-01",
    }


def test_account_actions():
    operation = list_domain_names()
    assert operation.http_method == HTTPMethod.GET
    assert operation.params == {
        "Action": "ListDomainNames",
        "Version": "2013-01-01",
    }

    operation = describe_domains(names=["movies", "music"])
    assert operation.http_method == HTTPMethod.POST
    assert operation.params == {
        "DomainNames.member.1": "movies",
        "DomainNames.member.2": "music",
        "Action": "DescribeDomains",
        "Version": "2013-01-01",
    }


def test_describe_options():
    operation = describe_suggesters(
        "movies", deployed=True, names=["title", "plot"]
    )
    assert operation.http_method == HTTPMethod.POST
    assert operation.params == {
        "Deployed": "true",
        "SuggesterNames.member.1": "title",
        "SuggesterNames.member.2": "plot",
        "Action": "DescribeSuggesters",
        "DomainName": "movies",
        "Version": "2013-01-01",
    }

    operation = describe_index_fields("movies", names="title")
    assert operation.params["FieldNames.member.1"] == "title"
    assert "Deployed" not in operation.params

    operation = describe_service_access_policies("movies", deployed=False)
    assert operation.params["Deployed"] == "false"


def test_forced_post_ignores_http_method():
    operation = describe_expressions("movies", http_method="get")
    assert operation.http_method == HTTPMethod.POST

    operation = delete_domain("movies", http_method="post")
    assert operation.http_method == HTTPMethod.POST


def test_suggester_actions():
    operation = define_suggester(
        "movies",
        {
            "SuggesterName": "title",
            "DocumentSuggesterOptions": {
                "SourceField": "title",
                "FuzzyMatching": "low",
            },
        },
    )
    assert operation.http_method == HTTPMethod.GET
    assert operation.params == {
        "Suggester.SuggesterName": "title",
        "Suggester.DocumentSuggesterOptions.SourceField": "title",
        "Suggester.DocumentSuggesterOptions.FuzzyMatching": "low",
        "Action": "DefineSuggester",
        "DomainName": "movies",
        "Version": "2013-01-01",
    }

    operation = delete_suggester("movies", "title")
    assert operation.params["SuggesterName"] == "title"


def test_analysis_scheme_actions():
    operation = define_analysis_scheme(
        "movies",
        {
            "AnalysisSchemeName": "simple_en",
            "AnalysisSchemeLanguage": "en",
            "AnalysisOptions": {"Stopwords": '["a","an","the"]'},
        },
    )
    assert operation.params["AnalysisScheme.AnalysisSchemeName"] == (
        "simple_en"
    )
    assert operation.params["AnalysisScheme.AnalysisOptions.Stopwords"] == (
        '["a","an","the"]'
    )

    operation = delete_analysis_scheme("movies", "simple_en")
    assert operation.params["AnalysisSchemeName"] == "simple_en"


def test_update_actions():
    operation = update_availability_options("movies", 1)
    assert operation.http_method == HTTPMethod.POST
    assert operation.params["MultiAZ"] == "true"

    operation = update_availability_options("movies", False)
    assert operation.params["MultiAZ"] == "false"

    operation = update_scaling_parameters(
        "movies",
        {"DesiredInstanceType": "search.small", "DesiredReplicationCount": 2},
    )
    assert operation.http_method == HTTPMethod.POST
    assert operation.params["ScalingParameters.DesiredInstanceType"] == (
        "search.small"
    )
    assert operation.params["ScalingParameters.DesiredReplicationCount"] == 2


def test_update_service_access_policies():
    operation = update_service_access_policies(
        "movies", '{"Version":"2012-10-17"}'
    )
    assert operation.http_method == HTTPMethod.POST
    assert operation.params["AccessPolicies"] == '{"Version":"2012-10-17"}'

    operation = update_service_access_policies(
        "movies", {"Version": "2012-10-17", "Statement": []}
    )
    assert operation.params["AccessPolicies"] == JSONParam(
        {"Version": "2012-10-17", "Statement": []}
    )

    with pytest.raises(BadRequestError):
        update_service_access_policies("movies", 42)


def test_expression_actions():
    operation = define_expression("movies", "popularity", "_score*rating")
    assert operation.params == {
        "Expression.ExpressionName": "popularity",
        "Expression.ExpressionValue": "_score*rating",
        "Action": "DefineExpression",
        "DomainName": "movies",
        "Version": "2013-01-01",
    }

    operation = delete_expression("movies", "popularity")
    assert operation.params["ExpressionName"] == "popularity"


def test_define_index_field():
    operation = define_index_field(
        "movies",
        IndexField(
            name="title",
            type=IndexFieldType.TEXT,
            options=IndexFieldOptions(scheme="_en_default_", sort=False),
        ),
    )
    assert operation.params == {
        "IndexField.IndexFieldName": "title",
        "IndexField.IndexFieldType": "text",
        "IndexField.TextOptions.ReturnEnabled": "true",
        "IndexField.TextOptions.SortEnabled": "false",
        "IndexField.TextOptions.HighlightEnabled": "true",
        "IndexField.TextOptions.AnalysisScheme": "_en_default_",
        "Action": "DefineIndexField",
        "DomainName": "movies",
        "Version": "2013-01-01",
    }


def test_define_index_field_shapes():
    operation = define_index_field(
        "movies",
        {
            "name": "genres",
            "type": "literal-array",
            "options": {"source": ["genre", "subgenre"], "return": False},
        },
    )
    assert operation.params["IndexField.IndexFieldType"] == "literal-array"
    options = {
        k: v
        for k, v in operation.params.items()
        if k.startswith("IndexField.LiteralArrayOptions.")
    }
    assert options == {
        "IndexField.LiteralArrayOptions.SourceFields": "genre,subgenre",
        "IndexField.LiteralArrayOptions.FacetEnabled": "true",
        "IndexField.LiteralArrayOptions.SearchEnabled": "true",
        "IndexField.LiteralArrayOptions.ReturnEnabled": "false",
    }

    operation = define_index_field(
        "movies",
        {"IndexFieldName": "year", "IndexFieldType": "int"},
    )
    assert operation.params["IndexField.IndexFieldName"] == "year"
    assert operation.params["IndexField.IndexFieldType"] == "int"

    operation = define_index_field(
        "movies", IndexField(name="year", type=IndexFieldType.INT)
    )
    assert "IndexField.IntOptions.SortEnabled" not in operation.params

    operation = delete_index_field("movies", "year")
    assert operation.params["IndexFieldName"] == "year"


def test_request_errors():
    with pytest.raises(BadRequestError):
        request("reticulate_splines", "movies")
    with pytest.raises(BadRequestError):
        request("define_expression", "movies", "popularity")


def test_api_version_option():
    operation = index_documents("movies", api_version="2011-02-01")
    assert operation.api_version == "2011-02-01"
    assert operation.params["Version"] == "2011-02-01"
