"""budgetapi - Personal Budget API.

A small FastAPI service exposing create/read/update/delete operations over an
in-memory collection of named food prices.

Usage:
    budgetapi serve --port 3000     # Run the HTTP API
    budgetapi routes                # Show the route table
"""

__version__ = "2.0.0"
