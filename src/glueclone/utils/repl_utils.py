"""Colored console output for the GlueClone scripts"""

colors = {
    "lightblue": "\x1b[38;5;69m",
    "lightpurple": "\x1b[38;5;141m",
    "lightgreen": "\x1b[38;5;113m",
    "yellow": "\x1b[38;5;226m",
    "orange": "\x1b[38;5;208m",
    "grey": "\x1b[38;5;244m",
}
RESET = "\x1b[0m"


def cprint(*args):
    """Print color/text pairs on one line: cprint("yellow", "hi") or cprint(["grey", "a", "orange", "b"])"""
    pairs = args[0] if isinstance(args[0], list) else args
    print(" ".join(f"{colors[color]}{text}{RESET}" for color, text in zip(pairs[::2], pairs[1::2])))


def print_clone_result(result):
    """Print a CloneResult summary in color"""
    cprint(["lightpurple", "Workflow:", "lightgreen", f"{result.source_name} -> {result.workflow_name}"])
    if result.deleted_existing:
        cprint("orange", f"  Replaced existing workflow {result.workflow_name}")
    for trigger_name in result.triggers:
        cprint(["lightpurple", "  Trigger:", "lightblue", trigger_name])
