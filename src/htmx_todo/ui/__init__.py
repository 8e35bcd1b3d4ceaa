"""Server-rendered todo UI.

The browser runs no application code of its own: htmx attributes in the
rendered markup issue the requests, and each response is an HTML fragment
swapped into the page in place.
"""
