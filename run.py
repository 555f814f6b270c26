from app import create_app

app = create_app()


def main():
    host = app.config['HOST']
    port = app.config['PORT']
    print(f"Server is running at http://{host}:{port}")
    app.run(host=host, port=port, threaded=True)


if __name__ == '__main__':
    main()
