from cjk_fontsel.cli.main import cli

if __name__ == "__main__":
    cli()
