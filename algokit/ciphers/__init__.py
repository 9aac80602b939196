"""Substitution, Morse, Polybius, transposition and TEA ciphers, and SHA-256."""