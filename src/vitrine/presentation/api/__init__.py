"""REST API: routes, middleware and upload staging."""
