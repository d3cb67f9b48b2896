"""Wavetable file I/O."""
