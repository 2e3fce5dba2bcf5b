DEFAULTS = {
    # Title of the FastAPI application
    "APP_NAME": "mindgraph-backend",
    # Prefix prepended to every route
    "API_PREFIX": "",
    # Undo steps kept by the session history (0 disables undo)
    "HISTORY_MAX_STEPS": 16,
    # Start new sessions from the Welcome/Ideas/Tasks sample graph
    "SEED_SAMPLE_GRAPH": True,
}
