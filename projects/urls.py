from django.urls import path
from .views import AllProjectListView, ManagerProjectListView, ProjectCreateView, ProjectDetailView

urlpatterns = [
    path("projects/", ProjectCreateView.as_view(), name="project-create"),
    path("projects/manager/", ManagerProjectListView.as_view(), name="project-manager-list"),
    path("projects/all/", AllProjectListView.as_view(), name="project-all-list"),
    path("projects/<uuid:project_id>/", ProjectDetailView.as_view(), name="project-detail"),
]
