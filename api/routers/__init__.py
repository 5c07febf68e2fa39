"""
API Routers - Endpoint handlers for the results proxy.

- results: proxied portal endpoints (details, results, examinfo, sgpa, allsession)
"""
