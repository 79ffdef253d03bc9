from samsung_cli.main import run

run()
