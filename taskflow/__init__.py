"""taskflow: workspace task API (create, update, list, fetch, delete) with assignment email."""
