"""
Scenes package for Canvas Pong.
Modules here are auto-discovered by mini-arcade-core's SceneRegistry.
"""
