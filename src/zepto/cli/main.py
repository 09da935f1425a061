"""Main CLI entry point."""


def main() -> None:
    """Main CLI entry point."""
    from zepto.cli.app import create_app
    app = create_app()
    app()


if __name__ == "__main__":
    main()
