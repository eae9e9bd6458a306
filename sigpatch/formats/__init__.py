"""
File formats: hex signature text and patch-set definitions.
"""
