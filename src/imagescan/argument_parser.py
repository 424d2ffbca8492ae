"""
Data-driven argument parsing for the scanner scripts.

Scripts describe themselves in SCRIPT_INFO and their arguments in an
ARGUMENTS dictionary; ScriptArgumentParser turns those into an argparse
parser with generated help text.

Usage:
    from imagescan.argument_parser import ScriptArgumentParser

    SCRIPT_INFO = {
        'name': 'Scan Images',
        'description': 'Report image files below a directory',
        'examples': ['/path/to/photos']
    }

    ARGUMENTS = {
        'directory': {
            'positional': True,
            'help': 'Directory to scan'
        },
        'verbose': {
            'short': '-v',
            'action': 'store_true',
            'help': 'Enable verbose output'
        }
    }

    script_parser = ScriptArgumentParser(SCRIPT_INFO, ARGUMENTS)
    args = script_parser.parse_args()
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from .logging import ScriptLogging


class UsageError(Exception):
    """Raised when the command line cannot be parsed."""


class _RaisingArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


class ScriptArgumentParser:
    """Build a CLI from argument definitions."""

    def __init__(self, script_info: Dict[str, Any], arguments: Dict[str, Any]):
        """
        Initialize the argument parser.

        Args:
            script_info: Script metadata with 'name', 'description' and
                'examples' (list of usage examples)
            arguments: Argument definitions keyed by name. Each value holds
                'help' and optionally 'positional', 'flag', 'short', 'action',
                'type', 'default', 'choices' or 'dest'.
        """
        self.script_info = script_info
        self.arguments = arguments
        self._parser = None

    def error(self, message: str) -> None:
        """Print a command line error to stderr."""
        print(f"❌ Error: {message}", file=sys.stderr)

    def create_help_text(self) -> str:
        """
        Generate help text from the argument definitions.

        Returns:
            Usage patterns, argument list and examples.
        """
        lines = ["Usage patterns:"]

        positional = [
            key.upper() for key, arg_def in self.arguments.items() if arg_def.get("positional")
        ]
        if positional:
            lines.append(f"  %(prog)s {' '.join(positional)} [OPTIONS]")
        else:
            lines.append("  %(prog)s [OPTIONS]")

        lines.append("")
        lines.append("Required arguments:")
        for key, arg_def in self.arguments.items():
            if arg_def.get("positional"):
                lines.append(f"  {key.upper():<12} {arg_def['help']}")

        lines.append("")
        lines.append("Optional arguments:")
        for key, arg_def in self.arguments.items():
            if arg_def.get("positional"):
                continue
            flag_text = arg_def.get("flag", f"--{key.replace('_', '-')}")
            if arg_def.get("short"):
                flag_text += f", {arg_def['short']}"
            lines.append(f"  {flag_text:<14} {arg_def['help']}")

        lines.append("")
        lines.append("Examples:")
        for example in self.script_info["examples"]:
            lines.append(f"  %(prog)s {example}")

        return "\n".join(lines)

    def create_argument_parser(self) -> argparse.ArgumentParser:
        """
        Create the argument parser from the argument definitions.

        Returns:
            Configured ArgumentParser instance.
        """
        parser = _RaisingArgumentParser(
            description=self.script_info["description"],
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self.create_help_text(),
        )

        for key, arg_def in self.arguments.items():
            if arg_def.get("positional"):
                # Positional argument with a named alternative
                parser.add_argument(key, nargs="?", help=arg_def["help"])
                alt_help = f"{arg_def['help']} (alternative to positional)"
                parser.add_argument(f"--{key}", dest=f"{key}_named", help=alt_help)
                continue

            args = [arg_def.get("flag", f"--{key.replace('_', '-')}")]
            if arg_def.get("short"):
                args.append(arg_def["short"])

            kwargs = {"help": arg_def["help"]}
            for option in ("dest", "action", "type", "choices"):
                if arg_def.get(option):
                    kwargs[option] = arg_def[option]
            if arg_def.get("default") is not None:
                kwargs["default"] = arg_def["default"]

            parser.add_argument(*args, **kwargs)

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """
        Parse command line arguments.

        Arguments the parser does not know about are ignored.

        Args:
            args: Optional list of arguments to parse. If None, uses sys.argv.

        Returns:
            Parsed argument namespace.

        Raises:
            UsageError: If the arguments cannot be parsed
        """
        if self._parser is None:
            self._parser = self.create_argument_parser()

        namespace, _extra = self._parser.parse_known_args(args)
        return namespace

    def resolve_args(self, args: argparse.Namespace) -> Dict[str, Any]:
        """
        Merge positional arguments with their named alternatives.

        Positional values take precedence. A positional argument given in
        neither form resolves to None; the caller decides how to report it.

        Args:
            args: Parsed argument namespace

        Returns:
            Dictionary of resolved argument values
        """
        resolved = {}
        for key, value in vars(args).items():
            if key.endswith("_named"):
                continue
            if self.arguments.get(key, {}).get("positional"):
                if value is None:
                    value = getattr(args, f"{key}_named", None)
            resolved[key] = value
        return resolved

    def setup_logging(self, resolved_args: Dict[str, Any], script_name: str, config=None):
        """
        Set up logging for the script.

        Args:
            resolved_args: Dictionary of resolved arguments
            script_name: Logger name and log file prefix
            config: Optional settings supplying log format, level and directory

        Returns:
            Configured logger instance
        """
        return ScriptLogging.get_script_logger(
            name=script_name,
            debug=bool(resolved_args.get("verbose")),
            config=config,
        )


def create_standard_arguments() -> Dict[str, Any]:
    """
    Common arguments shared by the scanner scripts.

    Returns:
        Dictionary of standard argument definitions.
    """
    return {
        "verbose": {
            "short": "-v",
            "action": "store_true",
            "help": "Enable verbose/debug output on stderr",
        },
    }


def merge_arguments(*arg_dicts: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge argument dictionaries, with later ones taking precedence.

    Args:
        *arg_dicts: Variable number of argument dictionaries to merge

    Returns:
        Merged argument dictionary
    """
    result = {}
    for arg_dict in arg_dicts:
        result.update(arg_dict)
    return result
