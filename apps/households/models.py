from django.db import models
import uuid


class HouseholdRole(models.TextChoices):
    OWNER = 'owner', 'Owner'
    MEMBER = 'member', 'Member'


class CategoryType(models.TextChoices):
    GROCERY = 'grocery', 'Grocery'
    EXPENSE = 'expense', 'Expense'


class Household(models.Model):
    """A home whose groceries, bills and budgets are tracked together."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='created_households'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'households'
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def has_member(self, user):
        return self.memberships.filter(user=user).exists()

    def get_user_role(self, user):
        try:
            return self.memberships.get(user=user).role
        except HouseholdMembership.DoesNotExist:
            return None


class HouseholdMembership(models.Model):
    """User membership in a household with role."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='household_memberships')
    household = models.ForeignKey(Household, on_delete=models.CASCADE, related_name='memberships')
    role = models.CharField(max_length=20, choices=HouseholdRole.choices, default=HouseholdRole.MEMBER)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'household_memberships'
        unique_together = [['user', 'household']]
        indexes = [
            models.Index(fields=['user', 'joined_at'], name='membership_user_joined_idx'),
        ]
        ordering = ['joined_at']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.household.name} ({self.role})"


class Category(models.Model):
    """Household-scoped label for groceries or expenses."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    household = models.ForeignKey(Household, on_delete=models.CASCADE, related_name='categories')
    name = models.CharField(max_length=100)
    type = models.CharField(max_length=20, choices=CategoryType.choices)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_categories'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'categories'
        constraints = [
            models.UniqueConstraint(
                fields=['household', 'name', 'type'],
                name='unique_category_per_household',
            ),
        ]
        ordering = ['type', 'name']
        verbose_name_plural = 'categories'

    def __str__(self):
        return f"{self.name} ({self.type})"
