import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from accounts.identity import authenticate
from accounts.permissions import IsProjectManager, IsVerifier

from .serializers import ProjectSerializer, ProjectWithManagerSerializer
from .services.project_service import ProjectService

logger = logging.getLogger("projects.views")


class ProjectCreateView(APIView):
    permission_classes = [IsProjectManager]

    def post(self, request):
        identity = authenticate(request)
        project = ProjectService().create_project(request.data, identity)

        return Response(
            {
                "projectId": str(project.id),
                "project": ProjectSerializer(project).data,
            },
            status=status.HTTP_201_CREATED,
        )


class ManagerProjectListView(APIView):
    permission_classes = [IsProjectManager]

    def get(self, request):
        identity = authenticate(request)
        service = ProjectService()

        projects = service.get_manager_projects(identity.user_id)

        return Response(
            {
                "projects": ProjectSerializer(projects, many=True).data,
                "stats": service.get_project_stats(projects),
            },
            status=status.HTTP_200_OK,
        )


class AllProjectListView(APIView):
    permission_classes = [IsVerifier]

    def get(self, request):
        projects = ProjectService().get_all_projects()

        logger.info("project.all_listing | count=%s", len(projects))

        return Response(
            {"projects": ProjectWithManagerSerializer(projects, many=True).data},
            status=status.HTTP_200_OK,
        )


class ProjectDetailView(APIView):
    permission_classes = [IsProjectManager]

    def delete(self, request, project_id):
        identity = authenticate(request)
        ProjectService().delete_project(project_id, identity)

        return Response(
            {"success": True, "message": "Project deleted successfully"},
            status=status.HTTP_200_OK,
        )
