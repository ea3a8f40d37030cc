"""
Example usage of the SOQL builder.

Builds a few queries and prints them; set SOQL_BUILDER_LOG_LEVEL=DEBUG to see
the builder's own log output.
"""

from soql_builder import InvalidQueryError, QueryBuilder
from soql_builder.adapters.salesforce import SoqlQueryTranslator
from soql_builder.config import configure_logging
from soql_builder.query import QueryTranslator


def build_simple_query():
    """Fluent builder with filters, grouping and paging."""
    print("\n=== Builder ===")
    soql = (
        QueryBuilder()
        .from_("Opportunity")
        .select(["Id", "Name", "Amount"])
        .where("IsClosed", "=", False)
        .start_where()
        .where("StageName", "=", "Prospecting")
        .or_where_in("Type", ["New Business", "Renewal"])
        .end_where()
        .where_date("CloseDate", ">", "2024-01-01")
        .order_by_desc("Amount")
        .limit(50)
        .to_soql()
    )
    print(soql)


def translate_filters():
    """Structured filters translated into one query per slice."""
    print("\n=== Translator ===")
    translator = QueryTranslator(SoqlQueryTranslator("Account", ["Id", "Name"]))
    filters = {
        "filters": [
            {
                "conditions": [
                    {"field": "Industry", "operator": "isin", "value": ["Banking", "Energy"]},
                    {"field": "CreatedDate", "operator": "between", "value": ["2024-01-01", "2024-06-30"]},
                ],
                "sort": [{"field": "Name", "order": "asc"}],
                "limit": 100,
            }
        ]
    }
    for soql in translator.translate(filters, {"CreatedDate": {"type": "date"}}):
        print(soql)


def show_validation_error():
    print("\n=== Validation ===")
    try:
        QueryBuilder().select(["Id"]).to_soql()
    except InvalidQueryError as e:
        print(f"❌ {e}")


if __name__ == "__main__":
    configure_logging()
    build_simple_query()
    translate_filters()
    show_validation_error()
