"""colorcue.database: the word -> score flat-file index.

The Cleaner filters a raw word list, the Initializer scores and writes it
as sorted `score,word` lines, and the Finder and DataChecker read it back
through the shared record cache in accessor.py.
"""
