"""HTTP surface for the workflow page."""
