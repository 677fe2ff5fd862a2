from version_detector.cli import app

app(prog_name="version-detector")
