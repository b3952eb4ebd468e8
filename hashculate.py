from cli.main import hashculate_cli

if __name__ == "__main__":
    hashculate_cli()
