from .cli import app


def main() -> None:
    app(prog_name="validkit")


if __name__ == "__main__":
    main()
