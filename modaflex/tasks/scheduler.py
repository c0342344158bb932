# modaflex/tasks/scheduler.py
from __future__ import annotations

import atexit
import os

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from modaflex.tasks.late_check import run_late_check_job


def start_scheduler(app):
    """
    - Não inicia com SCHEDULER_ENABLED desligado (testes, workers extras).
    - Evita execução dupla sob o reloader do modo debug.
    - Para o scheduler quando o processo encerra.
    """
    if not app.config.get("SCHEDULER_ENABLED", True):
        app.logger.info("[scheduler] Desabilitado por configuração.")
        return None

    # o reloader do Werkzeug roda dois processos; só o principal tem WERKZEUG_RUN_MAIN=true
    if app.debug and os.environ.get("WERKZEUG_RUN_MAIN") != "true":
        app.logger.info("[scheduler] Processo secundário do reloader: scheduler ignorado.")
        return None

    minutes = int(app.config.get("LATE_CHECK_INTERVAL_MINUTES", 10))
    scheduler = BackgroundScheduler(timezone="UTC")

    scheduler.add_job(
        func=run_late_check_job,
        args=[app],
        trigger=IntervalTrigger(minutes=minutes),
        id="late_check_job",
        replace_existing=True,
        max_instances=1,        # não sobrepor execuções
        coalesce=True,          # execuções perdidas viram uma só
        misfire_grace_time=120
    )

    scheduler.start()
    app.logger.info(f"[scheduler] Late check job started (every {minutes} minutes).")

    app.extensions["apscheduler"] = scheduler

    atexit.register(lambda: scheduler.shutdown(wait=False) if scheduler.running else None)

    return scheduler
