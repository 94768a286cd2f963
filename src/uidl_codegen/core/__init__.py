"""
Core Package.

Contains the generation pipeline:
- Element resolution and tree building
- Chunk model and linker
- Plugin registry and pipeline
- Dependency collection
"""
