"""Integration tests for folio.

This package contains end-to-end tests for building the site, the CLI
commands and the content shipped with the repository.

Test Structure:
- test_site_build.py: Rendering the whole site to disk
- test_cli.py: Command-line workflows through Typer's test runner
- test_shipped_content.py: Front-matter of every post in data/blog
"""
