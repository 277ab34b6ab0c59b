from cli_tooling.version_info import __version__
