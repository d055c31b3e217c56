"""CLI parameter parsing and merging.

Parses ``-p key=value`` flags and positional ``key=value`` arguments into
a single dictionary. Whether a demonstration accepts a given key is
checked by the runner, not here.
"""


class ParamParser:
    """Parse and merge CLI parameters from multiple sources."""

    @staticmethod
    def parse_key_value(arg: str) -> tuple[str, str] | None:
        """Parse key=value argument."""
        if "=" not in arg:
            return None
        key, _, value = arg.partition("=")
        key = key.strip()
        if not key:
            return None
        return (key.replace("-", "_"), value.strip())

    @staticmethod
    def merge_params(
        param_flags: list[str],
        extra_args: tuple[str, ...],
    ) -> dict[str, str]:
        """
        Merge parameters from all sources.

        Positional key=value arguments take precedence over -p flags.

        Raises:
            ValueError: If an argument is not of the form key=value
        """
        params: dict[str, str] = {}

        for arg in (*param_flags, *extra_args):
            parsed = ParamParser.parse_key_value(arg)
            if parsed is None:
                raise ValueError(f"Expected key=value, got '{arg}'")
            key, value = parsed
            params[key] = value

        return params
