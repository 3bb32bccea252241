from js_minifier.api import create_app

app = create_app()
