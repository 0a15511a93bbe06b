import uuid
from django.db import models
from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin, BaseUserManager


class Role(models.TextChoices):
    PROJECT_MANAGER = "project_manager", "Project Manager"
    NCCR_VERIFIER = "nccr_verifier", "NCCR Verifier"
    BUYER = "buyer", "Buyer"


class UserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Email is required")

        if "role" not in extra_fields:
            raise ValueError("User role is required")

        if extra_fields["role"] not in Role.values:
            raise ValueError(f"Unknown role: {extra_fields['role']}")

        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_superuser(self, email, password, **extra_fields):
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", Role.NCCR_VERIFIER)
        extra_fields.setdefault("is_active", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")

        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    Role = Role

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, db_index=True)
    full_name = models.CharField(max_length=255, blank=True)
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.BUYER,
        db_index=True,
    )

    is_active = models.BooleanField(default=True, db_index=True)
    is_staff = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["role", "is_active"], name="accounts_user_role_active_idx"),
        ]

    def save(self, *args, **kwargs):
        if self.pk and not self._state.adding:
            stored_role = (
                type(self).objects.filter(pk=self.pk).values_list("role", flat=True).first()
            )
            if stored_role and stored_role != self.role:
                raise ValueError("User role cannot be changed after signup")
        super().save(*args, **kwargs)

    def __str__(self):
        return self.email
