"""colorcue.core: foundation layer.

Contains the colour model, the codec (tuple codec, word scoring, special
words, encoder, decoder), configuration, console and report helpers.
Only the encoder reaches into colorcue.database; nothing here imports
colorcue.commands or colorcue.registry.
"""
