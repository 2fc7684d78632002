"""
Job Board - CLI Entry Point.

Terminal client: log in or register, browse and filter job listings page by page,
apply with a CV, and check notifications.
"""

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from jobboard.app import App, open_app
from jobboard.config import settings
from jobboard.controllers import FormController, PaginatedListController, RequestTracker
from jobboard.controllers.values import to_plain
from jobboard.forms import (
    APPLICATION_FORM_DEFAULTS,
    LOGIN_FORM_DEFAULTS,
    REGISTER_FORM_DEFAULTS,
    application_payload,
    validate_application,
    validate_login,
    validate_register,
)
from jobboard.utils import format_application_status, format_currency, truncate_text

HELP = (
    "Commands: /next, /prev, /page N, /filter key=value, /refresh, /show ID,\n"
    "          /apply ID CV_PATH, /delete ID, /applications, /notifications, /logout, /quit"
)


async def ask(prompt: str) -> str:
    return (await asyncio.to_thread(input, prompt)).strip()


def on_navigate(path: str) -> None:
    print(f"[-> {path}]")


async def fill(form: FormController, fields: tuple[str, ...]) -> None:
    """Prompt for each field, showing its error as soon as it is left."""
    for field in fields:
        value = await ask(f"{field.replace('_', ' ').capitalize()}: ")
        form.handle_change(field, value)
        form.handle_blur(field)
        if form.error_for(field):
            print(f"  {form.error_for(field)}")


async def login(app: App) -> bool:
    """Prompt for credentials until login succeeds or the user gives up."""

    async def submit(values):
        result = await app.session.login(to_plain(values))
        if not result.success:
            print(f"Error: {result.message or 'Invalid email or password'}")

    form = FormController(LOGIN_FORM_DEFAULTS, validate_login, submit)

    while not app.session.is_authenticated:
        await fill(form, ("email", "password"))

        await form.handle_submit()
        if form.errors:
            continue

        if not app.session.is_authenticated:
            again = await ask("Try again? (y/n): ")
            if again.lower() not in ("y", "yes"):
                return False
            form.reset_form()

    return True


async def register(app: App) -> bool:
    """Create a candidate or recruiter account."""

    async def submit(values):
        result = await app.session.register(to_plain(values))
        if not result.success:
            print(f"Error: {result.message or 'Registration failed'}")

    form = FormController(REGISTER_FORM_DEFAULTS, validate_register, submit)

    while not app.session.is_authenticated:
        await fill(form, ("name", "email", "password", "password_confirmation"))
        role = await ask("Role (candidate/recruiter): ")
        form.handle_change("role", role.lower() if role.lower() in ("candidate", "recruiter") else "")
        form.handle_blur("role")

        if not await form.handle_submit():
            for message in form.errors.values():
                print(f"  {message}")
            continue

        if not app.session.is_authenticated:
            again = await ask("Try again? (y/n): ")
            if again.lower() not in ("y", "yes"):
                return False
            form.reset_form()

    return True


def render_jobs(jobs: PaginatedListController) -> None:
    if jobs.error:
        print(f"Error: {jobs.error}")
    if not jobs.items:
        print("No job listings found.")
        return
    for job in jobs.items:
        salary = ""
        if job.salary_min is not None and job.salary_max is not None:
            salary = f" | {format_currency(job.salary_min)} - {format_currency(job.salary_max)}"
        print(f"  #{job.id} {job.title} @ {job.company} ({job.location}){salary}")
    print(f"Page {jobs.current_page} of {jobs.total_pages} ({jobs.total_items} jobs)")


async def apply(app: App, job_id: int, cv_path: str) -> None:
    tracker = RequestTracker(app.jobs.apply_for_job)

    async def submit(values):
        result = await tracker.execute(**application_payload(values, job_id))
        if result.success:
            print(f"Application #{result.data.id} submitted.")
        else:
            print(f"Error: {result.error}")

    form = FormController(APPLICATION_FORM_DEFAULTS, validate_application, submit)
    path = Path(cv_path)
    form.handle_file_change("cv", [path] if path.is_file() else [])
    if not await form.handle_submit():
        for message in form.errors.values():
            print(f"Error: {message}")


async def show_applications(app: App) -> None:
    tracker = RequestTracker(app.jobs.get_my_applications)
    result = await tracker.execute()
    if not result.success:
        print(f"Error: {result.error}")
        return
    if not result.data:
        print("No applications yet.")
    for application in result.data:
        label, _ = format_application_status(application.status)
        title = application.job_listing.title if application.job_listing else f"Job #{application.job_listing_id}"
        print(f"  #{application.id} {title}: {label}")


async def show_notifications(app: App) -> None:
    center = app.notifications
    await center.refresh_notifications()
    print(f"{center.unread_count} unread")
    for n in center.notifications:
        marker = " " if n.read_at else "*"
        print(f"  {marker} {truncate_text(n.message, 80)}")
    for n in center.notifications:
        if n.read_at is None:
            await center.mark_as_read(n.id)


async def browse(app: App) -> None:
    """Job listing loop."""
    params = {"sort": "created_at", "order": "desc", "per_page": settings.page_size}
    if app.session.user_role == "candidate":
        params["is_active"] = True

    async with PaginatedListController(app.jobs.get_all_jobs, params) as jobs:
        await jobs.wait()
        render_jobs(jobs)
        print(HELP)

        while app.session.is_authenticated:
            try:
                user_input = await ask("> ")
            except (KeyboardInterrupt, EOFError):
                break
            if not user_input:
                continue

            command, _, arg = user_input.partition(" ")
            command = command.lower()

            if command == "/quit":
                break
            elif command == "/logout":
                await app.session.logout()
                break
            elif command == "/next":
                jobs.next_page()
            elif command == "/prev":
                jobs.prev_page()
            elif command == "/page" and arg.isdigit():
                jobs.go_to_page(int(arg))
            elif command == "/filter" and "=" in arg:
                key, _, value = arg.partition("=")
                jobs.update_params({key.strip(): value.strip()})
            elif command == "/refresh":
                jobs.refresh()
            elif command == "/show" and arg.isdigit():
                tracker = RequestTracker(app.jobs.get_job_by_id)
                result = await tracker.execute(int(arg))
                if result.success:
                    job = result.data
                    print(f"{job.title} @ {job.company}\n{job.location} | {job.employment_type}\n\n{job.description}")
                else:
                    print(f"Error: {result.error}")
                continue
            elif command == "/apply":
                job_id, _, cv_path = arg.partition(" ")
                if not job_id.isdigit():
                    print("Usage: /apply ID CV_PATH")
                    continue
                await apply(app, int(job_id), cv_path.strip())
                continue
            elif command == "/delete" and arg.isdigit():
                tracker = RequestTracker(app.jobs.delete_job)
                result = await tracker.execute(int(arg))
                if not result.success:
                    print(f"Error: {result.error}")
                    continue
                jobs.refresh()
            elif command == "/applications":
                await show_applications(app)
                continue
            elif command == "/notifications":
                await show_notifications(app)
                continue
            else:
                print(HELP)
                continue

            await jobs.wait()
            render_jobs(jobs)


async def run() -> None:
    print("Job Board")
    print("=" * 40)

    async with open_app(navigate=on_navigate) as app:
        if app.session.is_authenticated:
            print(f"Welcome back, {app.session.current_user.name}")
        else:
            choice = await ask("Log in or register? (l/r): ")
            signed_in = await (register(app) if choice.lower() in ("r", "register") else login(app))
            if not signed_in:
                return

        await browse(app)

    print("Goodbye!")


def main():
    """Run the job board CLI."""
    logging.basicConfig(level=settings.log_level)
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
