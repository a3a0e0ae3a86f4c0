"""
Helpers for feeding tokenizer output to a model.
"""
