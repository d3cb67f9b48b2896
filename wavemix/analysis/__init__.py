"""Wavetable measurements."""
