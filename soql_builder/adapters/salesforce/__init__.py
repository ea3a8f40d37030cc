"""Salesforce adapter for the SOQL builder."""

from soql_builder.adapters.salesforce.query_translator import SoqlQueryTranslator

__all__ = ["SoqlQueryTranslator"]
