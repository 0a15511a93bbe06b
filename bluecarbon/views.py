import logging
from decimal import Decimal

from django.db.models import Count, Sum
from django.utils import timezone
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status

from credits.models import CarbonCredit, Retirement
from projects.models import Project

logger = logging.getLogger("bluecarbon.views")


class HealthView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({"status": "ok", "timestamp": timezone.now().isoformat()})


class PublicStatsView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        projects = Project.objects.aggregate(total=Count("id"), area=Sum("area"))
        issued = CarbonCredit.objects.aggregate(total=Sum("amount"))
        retired = Retirement.objects.aggregate(total=Sum("amount"), count=Count("id"))

        by_ecosystem = {
            row["ecosystem_type"]: row["count"]
            for row in Project.objects.order_by().values("ecosystem_type").annotate(count=Count("id"))
        }

        stats = {
            "totalProjects": projects["total"],
            "approvedProjects": Project.objects.filter(status=Project.Status.APPROVED).count(),
            "totalArea": projects["area"] or Decimal("0"),
            "creditsIssued": issued["total"] or Decimal("0"),
            "creditsRetired": retired["total"] or Decimal("0"),
            "totalRetirements": retired["count"],
            "projectsByEcosystem": by_ecosystem,
        }

        logger.info("public_stats.fetched | projects=%s", stats["totalProjects"])
        return Response(stats, status=status.HTTP_200_OK)
