"""
Core building blocks shared by the API layer.

``config`` reads settings from the environment, ``logging_config``
configures the root logger, ``errors`` defines the error taxonomy
mapped onto HTTP statuses and ``store`` holds the lock‑guarded post
collection.
"""
