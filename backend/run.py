from quizroom import create_app

app = create_app()

if __name__ == '__main__':
    # Threaded dev server: each request (and each SSE stream) gets its own thread
    app.run(host=app.config['HOST'], port=app.config['PORT'], debug=True, threaded=True)
