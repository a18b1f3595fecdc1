from django.apps import apps
from django.urls import path, re_path
from todo.views.task import TaskListView, TaskDetailView, UserTasksView
from todo.views.health import HealthView, RootView
from todo.views.user import UsersView

todo_app = apps.get_app_config("todo")

urlpatterns = [
    path("", RootView.as_view(), name="root"),
    path("health", HealthView.as_view(db_manager=todo_app.db_manager), name="health"),
    path("tasks", TaskListView.as_view(task_service=todo_app.task_service), name="tasks"),
    re_path(
        r"^tasks/users/(?P<email>[^/]*)$",
        UserTasksView.as_view(task_service=todo_app.task_service),
        name="user_tasks",
    ),
    path("tasks/<str:task_id>", TaskDetailView.as_view(task_service=todo_app.task_service), name="task_detail"),
    path("users", UsersView.as_view(user_service=todo_app.user_service), name="users"),
]
