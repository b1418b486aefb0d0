"""gocompile: cross-compile a Go program for several GOOS/GOARCH targets."""

__version__ = "0.1.0"
