"""SPM Acknowledgements - Generate license acknowledgements for Swift packages."""

__version__ = "0.1.0"
