"""Features module for neo-authz.

Each feature owns its entities and services:
- catalog: permission definitions, snapshots, loading and caching
- grants: grant sets, principals, basic <-> granular mapping
- permissions: role resolution and the query facade
- presets: permission bundles and the engine applying them
"""
