"""FastAPI backend for the Ship & Port tracker."""
