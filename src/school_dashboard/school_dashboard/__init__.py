"""School dashboard package.

This package is organized by feature modules (students, employees, attendance, ...)
with a thin Flask controller layer, service/repository layers, and a `client`
package holding the dashboard-side logic (REST client, query cache, list views,
bulk attendance recording).
"""
