"""
Endpoint subpackage.

Each module in this package defines the APIRouters for one resource.
The routers are aggregated in ``router.py`` at the package level and
then included in the main application.
"""
