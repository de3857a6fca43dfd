"""
Protocol command wrappers
"""
