from config_scanner.cli.app import app

app()
