"""Bit-accurate models of fixed-point DSP blocks: FIR filter, up-converter, DDS, windowing and FFT."""

__version__ = "0.1.0"