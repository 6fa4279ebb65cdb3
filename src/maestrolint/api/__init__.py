"""REST API for maestrolint."""
