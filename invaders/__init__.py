"""
Space Invaders - Source Package
================================

A pygame arcade shooter built around a deterministic simulation core.

Modules:
    game/       - Simulation core (entities, formation, motion, collisions, phases)
    storage/    - High score persistence
    audio/      - Synthesized sound effects
    visualizer/ - Rendering and on-screen score widgets
    input/      - Keyboard bindings
"""

__version__ = "1.0.0"
__author__ = "Your Name"
