"""tcgsearch — shared helpers"""
