"""Missing values algorithms: the build/apply contract, imputation and injection."""
