"""Demo web application for htmxkit.

A FastAPI server that renders a page and its htmx fragment endpoints with
htmxkit trees, and serves the bundled htmx JavaScript itself.

Requires the ``demo`` extra: ``pip install htmxkit[demo]``.
"""
