"""Formant speech synthesis: letter-to-sound rules, a character trie, a formant synthesiser and mu-law coding."""

__version__ = "0.1.0"

__all__ = ["rules", "synth", "trie", "ulaw", "ulaw_decode", "ulaw_encode"]