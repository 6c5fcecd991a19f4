"""Services Layer — orchestration between the HTTP shell and the pure core."""
