"""
Default directory for locally stored prompt decks
"""
