"""``mycli completion <shell>`` — shell completion scripts.

Scripts are rendered from the command registry and the global flags, so
new subcommands show up without touching this module.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from mycli.cli.commands import Command, GlobalFlag

SHELLS: tuple[str, ...] = ("bash", "zsh", "fish")


def _function_name(prog: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "_", prog)


def _flag_words(flags: Sequence[GlobalFlag]) -> list[str]:
    words: list[str] = []
    for flag in flags:
        words.append(flag.long)
        if flag.short:
            words.append(flag.short)
    words.extend(("--help", "-h", "--version", "-V"))
    return words


def _bash(prog: str, commands: Sequence[Command], flags: Sequence[GlobalFlag]) -> str:
    func = _function_name(prog)
    words = " ".join([command.name for command in commands] + _flag_words(flags))
    return (
        f"# bash completion for {prog}\n"
        f"_{func}_completions() {{\n"
        '    local cur="${COMP_WORDS[COMP_CWORD]}"\n'
        f'    COMPREPLY=( $(compgen -W "{words}" -- "$cur") )\n'
        "}\n"
        f"complete -o default -F _{func}_completions {prog}\n"
    )


def _zsh_quote(text: str) -> str:
    return text.replace("'", "'\\''").replace(":", "\\:")


def _zsh(prog: str, commands: Sequence[Command], flags: Sequence[GlobalFlag]) -> str:
    func = _function_name(prog)
    lines = [f"#compdef {prog}", "", f"_{func}() {{", "  local -a commands", "  commands=("]
    lines.extend(f"    '{command.name}:{_zsh_quote(command.summary)}'" for command in commands)
    lines.append("  )")
    lines.append("  _arguments \\")
    for flag in flags:
        help_text = _zsh_quote(flag.help).replace("[", "\\[").replace("]", "\\]")
        action = ":file:_files" if flag.metavar else ""
        if flag.short:
            lines.append(
                f"    '({flag.short} {flag.long})'{{{flag.short},{flag.long}}}'[{help_text}]{action}' \\"
            )
        else:
            lines.append(f"    '{flag.long}[{help_text}]{action}' \\")
    lines.append("    '1: :->cmds' \\")
    lines.append("    '*::arg:->args'")
    lines.append("  case $state in")
    lines.append("    cmds) _describe 'command' commands ;;")
    lines.append("  esac")
    lines.append("}")
    lines.append("")
    lines.append(f'_{func} "$@"')
    return "\n".join(lines) + "\n"


def _fish(prog: str, commands: Sequence[Command], flags: Sequence[GlobalFlag]) -> str:
    lines = [f"# fish completion for {prog}", f"complete -c {prog} -f"]
    for command in commands:
        summary = command.summary.replace("'", "\\'")
        lines.append(
            f"complete -c {prog} -n __fish_use_subcommand -a {command.name} -d '{summary}'"
        )
    for flag in flags:
        parts = [f"complete -c {prog}"]
        if flag.short:
            parts.append(f"-s {flag.short.lstrip('-')}")
        parts.append(f"-l {flag.long.lstrip('-')}")
        if flag.metavar:
            parts.append("-r -F")
        parts.append(f"-d '{flag.help}'")
        lines.append(" ".join(parts))
    return "\n".join(lines) + "\n"


_RENDERERS = {
    "bash": _bash,
    "zsh": _zsh,
    "fish": _fish,
}


def render_completion(
    shell: str,
    prog: str,
    commands: Sequence[Command],
    flags: Sequence[GlobalFlag],
) -> str:
    """Return the completion script for *shell*.

    Raises
    ------
    ValueError
        If *shell* is not one of :data:`SHELLS`.
    """
    try:
        renderer = _RENDERERS[shell]
    except KeyError:
        raise ValueError(f"unsupported shell: {shell}") from None
    return renderer(prog, commands, flags)
