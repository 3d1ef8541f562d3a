"""
Tip logging backend: receipt scanning and the tip store.
"""
