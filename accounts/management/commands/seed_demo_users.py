from django.core.management.base import BaseCommand

from accounts.models import Role, User


DEMO_USERS = [
    ("manager@demo.bluecarbon.org", "Demo Project Manager", Role.PROJECT_MANAGER),
    ("verifier@nccr.gov.in", "Demo NCCR Verifier", Role.NCCR_VERIFIER),
    ("buyer@demo.bluecarbon.org", "Demo Buyer", Role.BUYER),
]


class Command(BaseCommand):
    help = "Create one demo account per role"

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            default="DemoPass123!",
            help="Password for every demo account",
        )

    def handle(self, *args, **options):
        self.stdout.write("=" * 60)
        self.stdout.write("BLUE CARBON REGISTRY - DEMO USERS")
        self.stdout.write("=" * 60)

        for email, full_name, role in DEMO_USERS:
            if User.objects.filter(email=email).exists():
                self.stdout.write(f"  - Exists: {email} ({role.label})")
                continue

            User.objects.create_user(
                email=email,
                password=options["password"],
                full_name=full_name,
                role=role,
            )
            self.stdout.write(self.style.SUCCESS(f"  + Created: {email} ({role.label})"))

        self.stdout.write(f"\n  Total users: {User.objects.count()}")
