from fastapi import status


def test_stats_empty(client):
    response = client.get("/api/stats")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "success": True,
        "data": {"total": 0, "printed": 0, "uniqueRecipients": 0, "recent": 0},
    }


def test_stats(client, make_message, message_service):
    """Three messages to two recipients, one deleted."""
    make_message(destinatario_nome="Bruno")
    printed = make_message(destinatario_nome="Carla")
    deleted = make_message(destinatario_nome="Bruno")
    message_service.mark_printed(printed.id)
    message_service.soft_delete(deleted.id)

    data = client.get("/api/stats").json()["data"]

    assert data["total"] == 2
    assert data["printed"] == 1
    assert data["uniqueRecipients"] == 2
    assert data["recent"] == 2
