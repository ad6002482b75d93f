"""
Tests for the Socket.IO event handlers.
"""


def events(received, name):
    return [message['args'][0] for message in received if message['name'] == name]


def test_connect_sends_current_game(server, game_service):
    app, socketio = server
    game_service.submit_guess(["PLANT", "GROAN"])

    ws = socketio.test_client(app, flask_test_client=app.test_client())
    snapshots = events(ws.get_received(), 'game_updated')
    ws.disconnect()

    assert len(snapshots) == 1
    assert snapshots[0]['attempts_used'] == 1
    assert snapshots[0]['guesses'] == [["PLANT", "GROAN"]]


def test_submit_guess_replies_and_broadcasts(socket_client):
    socket_client.emit('submit_guess', {'guesses': ['apple', 'mango']})
    received = socket_client.get_received()

    results = events(received, 'guess_result')
    assert len(results) == 1
    assert results[0]['valid'] is True
    assert results[0]['won'] is True
    assert results[0]['game_over'] is True

    updates = events(received, 'game_updated')
    assert len(updates) == 1
    assert updates[0]['status'] == 'won'


def test_invalid_guess_does_not_broadcast(socket_client, game_service):
    socket_client.emit('submit_guess', {'guesses': ['APPLE']})
    received = socket_client.get_received()

    results = events(received, 'guess_result')
    assert results[0]['valid'] is False
    assert results[0]['error'] == "Expected 2 words, got 1"
    assert events(received, 'game_updated') == []
    assert game_service.get_state().attempts_used == 0


def test_malformed_payload_emits_error(socket_client):
    socket_client.emit('submit_guess', 'APPLE MANGO')

    errors = events(socket_client.get_received(), 'error')

    assert errors == [{'error': 'Invalid request'}]


def test_new_game_resets_and_broadcasts(socket_client, game_service):
    game_service.submit_guess(["PLANT", "GROAN"])

    socket_client.emit('new_game')
    received = socket_client.get_received()

    replies = events(received, 'new_game_result')
    assert replies[0]['success'] is True
    assert replies[0]['words'] == ["APPLE", "MANGO"]
    assert events(received, 'game_updated')[0]['attempts_used'] == 0
    assert game_service.get_state().attempts_used == 0


def test_http_guess_is_broadcast_to_sockets(client, socket_client):
    client.post('/api/guess', json={'guesses': ['PLANT', 'GROAN']})

    updates = events(socket_client.get_received(), 'game_updated')

    assert len(updates) == 1
    assert updates[0]['guesses'] == [["PLANT", "GROAN"]]


def test_broadcast_matches_guess_reply(socket_client):
    socket_client.emit('submit_guess', {'guesses': ['PLANT', 'GROAN']})
    received = socket_client.get_received()

    reply = events(received, 'guess_result')[0]
    update = events(received, 'game_updated')[0]

    assert update['guesses'] == reply['guesses']
    assert update['feedback'] == reply['feedback']
