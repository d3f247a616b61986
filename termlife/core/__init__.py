"""Grid engine: cells, boundary policies, rules and the grid itself."""
