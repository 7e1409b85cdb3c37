[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hlsdsp"
version = "0.1.0"
description = "Bit-accurate models of fixed-point DSP blocks: FIR filter, digital up-converter, DDS, windowing and a real-FFT front end"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dsp",
    "fixed-point",
    "fir",
    "dds",
    "digital-up-converter",
    "fft",
    "windowing",
    "bit-accurate",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hlsdsp-fir = "hlsdsp.fir:main"
hlsdsp-duc = "hlsdsp.duc:main"
hlsdsp-realfft = "hlsdsp.realfft:main"

[tool.hatch.build.targets.wheel]
packages = ["hlsdsp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
