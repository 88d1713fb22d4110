"""template-starter - import a template repository branch into the current project."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("template-starter")
except PackageNotFoundError:
    __version__ = "0.0.0"
