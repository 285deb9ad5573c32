"""REST API: chart listing and route scoring."""
