"""CLI command implementations for budgetspan."""
