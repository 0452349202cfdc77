from packctl.bootstrap.deps import get_cli
from packline.helpers.utils import scan, setup_logging


@scan("packctl.bootstrap.commands")
def main():
    cli = get_cli()
    setup_logging(cli.args.log_level)

    if cli.interactive:
        cli.cmdloop()
    else:
        cli.onecmd(cli.args.namespace)

    if cli.failed and not cli.interactive:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
