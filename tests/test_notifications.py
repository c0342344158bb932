from datetime import date

from modaflex.extensions import mail
from modaflex.models.notification_log import NotificationLog


def test_late_check_sends_each_reminder_once(app, client, auth_headers, admin_headers, set_today,
                                             make_customer, make_clothing, make_rental):
    set_today(date(2024, 1, 13))
    c = make_customer(email="ana@example.com")
    late = make_rental(c["id"], [make_clothing()["id"]], return_date="2024-01-10").get_json()["data"]
    soon = make_rental(c["id"], [make_clothing("Saia")["id"]], return_date="2024-01-14").get_json()["data"]
    make_rental(c["id"], [make_clothing("Terno")["id"]], return_date="2024-01-30")

    with mail.record_messages() as outbox:
        resp = client.post("/notifications/run-late-check", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.get_json()["data"] == {"overdue": 1, "due_soon": 1, "skipped": 0, "failed": 0}

        resp = client.post("/notifications/run-late-check", headers=admin_headers)
        assert resp.get_json()["data"]["skipped"] == 2

    assert len(outbox) == 2
    assert outbox[0].recipients == ["ana@example.com"]
    assert "R$ 60.00" in outbox[0].body

    with app.app_context():
        logs = NotificationLog.query.order_by(NotificationLog.id).all()
        assert [(log.rental_id, log.type) for log in logs] == [
            (late["id"], "overdue_reminder"),
            (soon["id"], "due_soon_reminder"),
        ]

    # status persistido continua "active"
    data = client.get(f"/rentals/{late['id']}", headers=auth_headers).get_json()["data"]
    assert data["status"] == "active"
    assert data["effective_status"] == "overdue"


def test_late_check_is_admin_only(client, auth_headers):
    assert client.post("/notifications/run-late-check", headers=auth_headers).status_code == 403


def test_scheduled_job_runs_in_app_context(app, set_today, make_customer, make_clothing, make_rental):
    from modaflex.tasks.late_check import run_late_check_job

    set_today(date(2024, 1, 20))
    c = make_customer()
    make_rental(c["id"], [make_clothing()["id"]], return_date="2024-01-10")

    with mail.record_messages() as outbox:
        result = run_late_check_job(app)

    assert result["overdue"] == 1
    assert len(outbox) == 1
    assert app.extensions.get("apscheduler") is None
