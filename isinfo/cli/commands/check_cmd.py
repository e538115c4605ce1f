# isinfo/cli/commands/check_cmd.py
"""
Check command - validate the configuration
"""


def register_command(subparsers):
    parser = subparsers.add_parser(
        "check",
        help="Validate configuration and list issues",
    )
    parser.set_defaults(func=run_check)


def run_check(args) -> int:
    config = args.loaded_config
    source = config.source or "(code defaults)"
    print(f"Configuration: {source}")

    issues = config.validate()
    if not issues:
        print("No issues found.")
        return 0

    for issue in issues:
        print(issue)

    errors = sum(1 for i in issues if i.level == "error")
    warnings = len(issues) - errors
    print(f"\n{errors} error(s), {warnings} warning(s)")
    return 1 if errors else 0
