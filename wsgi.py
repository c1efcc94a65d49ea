from presskits import create_app

app = create_app()
