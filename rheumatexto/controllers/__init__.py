"""
Controllers Package

HTTP blueprints for the game, statistics and settings endpoints.
"""
