"""
Infrastructure Layer

Presentation helpers around the valuation engine.
"""
