"""
Tests for translating structured filters into SOQL.
"""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from soql_builder.adapters.salesforce import SoqlQueryTranslator
from soql_builder.query.translator import QueryTranslator

MODEL_INFO = {
    "Name": {"type": "string"},
    "AnnualRevenue": {"type": "number"},
    "CreatedDate": {"type": "date"},
    "IsDeleted": {"type": "boolean"},
    "Industry": {"type": "enum", "values": ["Banking", "Energy"]},
}


def make_translator():
    return QueryTranslator(SoqlQueryTranslator("Account", ["Id", "Name"]))


def test_empty_filters_give_unfiltered_query():
    translator = make_translator()
    assert translator.translate({}, MODEL_INFO) == ["SELECT Id, Name FROM Account"]
    assert translator.translate({"filters": []}, MODEL_INFO) == ["SELECT Id, Name FROM Account"]


def test_comparison_operators():
    filters = {
        "filters": [
            {
                "conditions": [
                    {"field": "AnnualRevenue", "operator": ">", "value": 1000},
                    {"field": "AnnualRevenue", "operator": "<", "value": 5000},
                    {"field": "Name", "operator": "is", "value": "Acme"},
                    {"field": "Industry", "operator": "different", "value": "Energy"},
                ]
            }
        ]
    }
    assert make_translator().translate(filters, MODEL_INFO) == [
        "SELECT Id, Name FROM Account WHERE AnnualRevenue > 1000 AND AnnualRevenue < 5000 "
        "AND Name = 'Acme' AND Industry != 'Energy'"
    ]


def test_isin_and_notin():
    filters = {
        "filters": [
            {
                "conditions": [
                    {"field": "Industry", "operator": "isin", "value": ["Banking", "Energy"]},
                    {"field": "Name", "operator": "notin", "value": ["A", "B"]},
                    {"field": "AnnualRevenue", "operator": "isin", "value": 7},
                ]
            }
        ]
    }
    assert make_translator().translate(filters, MODEL_INFO) == [
        "SELECT Id, Name FROM Account WHERE Industry IN ('Banking', 'Energy') "
        "AND Name NOT IN ('A', 'B') AND AnnualRevenue = 7"
    ]


def test_between_on_dates_is_grouped_and_unquoted():
    filters = {
        "filters": [
            {
                "conditions": [
                    {"field": "CreatedDate", "operator": "between", "value": ["2024-01-01", date(2024, 12, 31)]},
                ]
            }
        ]
    }
    assert make_translator().translate(filters, MODEL_INFO) == [
        "SELECT Id, Name FROM Account WHERE (CreatedDate >= 2024-01-01 AND CreatedDate <= 2024-12-31)"
    ]


def test_contains_and_exists():
    filters = {
        "filters": [
            {
                "conditions": [
                    {"field": "Name", "operator": "contains", "value": "corp"},
                    {"field": "Industry", "operator": "exists", "value": True},
                    {"field": "CreatedDate", "operator": "exists", "value": False},
                ]
            }
        ]
    }
    assert make_translator().translate(filters, MODEL_INFO) == [
        "SELECT Id, Name FROM Account WHERE Name LIKE '%corp%' AND Industry != null AND CreatedDate = null"
    ]


def test_sort_limit_and_multiple_slices():
    filters = {
        "filters": [
            {
                "conditions": [{"field": "IsDeleted", "operator": "is", "value": False}],
                "sort": [{"field": "Name", "order": "asc"}, {"field": "CreatedDate", "order": "desc"}],
                "limit": 10,
            },
            {"conditions": [], "limit": 0},
        ]
    }
    assert make_translator().translate(filters, MODEL_INFO) == [
        "SELECT Id, Name FROM Account WHERE IsDeleted = false ORDER BY Name ASC, CreatedDate DESC LIMIT 10",
        "SELECT Id, Name FROM Account",
    ]


def test_unsupported_operator_and_options_are_skipped(caplog):
    filters = {
        "filters": [
            {
                "conditions": [
                    {"field": "Name", "operator": "sounds_like", "value": "x"},
                    {"field": "Name", "operator": "is", "value": "y"},
                ],
                "group_by": ["Industry"],
            }
        ]
    }
    with caplog.at_level("WARNING", logger="soql_builder"):
        result = make_translator().translate(filters, MODEL_INFO)

    assert result == ["SELECT Id, Name FROM Account WHERE Name = 'y'"]
    assert "sounds_like" in caplog.text
    assert "group_by" in caplog.text


def test_accepts_pydantic_filters():
    class Operator(str, Enum):
        gt = ">"

    class Condition(BaseModel):
        field: str
        operator: Operator
        value: float

    class Slice(BaseModel):
        conditions: List[Condition]
        limit: Optional[int] = None

    class QueryFilters(BaseModel):
        filters: List[Slice]

    filters = QueryFilters(
        filters=[Slice(conditions=[Condition(field="AnnualRevenue", operator=Operator.gt, value=1.5)], limit=3)]
    )
    translator = SoqlQueryTranslator("Account", ["Id"])
    assert translator.translate(filters, MODEL_INFO) == [
        "SELECT Id FROM Account WHERE AnnualRevenue > 1.5 LIMIT 3"
    ]


def test_contains_on_date_field_uses_plain_text():
    translator = SoqlQueryTranslator("Acc", ["Id"])
    filters = {"filters": [{"conditions": [{"field": "CreatedDate", "operator": "contains", "value": "2024"}]}]}
    assert translator.translate(filters, {"CreatedDate": {"type": "date"}}) == [
        "SELECT Id FROM Acc WHERE CreatedDate LIKE '%2024%'"
    ]


def test_translate_condition_returns_nothing():
    translator = SoqlQueryTranslator("Acc", ["Id"])
    builder = translator._new_builder()
    condition = {"field": "Name", "operator": "is", "value": "x"}
    assert translator._translate_condition(builder, condition, MODEL_INFO) is None
    assert builder.to_soql() == "SELECT Id FROM Acc WHERE Name = 'x'"
