from importlib.metadata import PackageNotFoundError, version

try:
    version = version("tagscan")
except PackageNotFoundError:
    version = "0.0.0"
