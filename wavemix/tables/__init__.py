"""Built-in wavetables."""
