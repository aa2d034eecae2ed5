"""budgetspan - pro-rate monthly budgets across arbitrary date ranges."""
