from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone


def money_field(**kwargs):
    return models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'),
                               validators=[MinValueValidator(Decimal('0.00'))], **kwargs)


class FeasibilityAssessment(models.Model):
    """Startup cost and revenue projection for a youth's business plan"""
    STATUS_CHOICES = [
        ('Draft', 'Draft'),
        ('In Progress', 'In Progress'),
        ('Completed', 'Completed'),
        ('Reviewed', 'Reviewed'),
    ]

    business = models.ForeignKey('businesses.BusinessProfile', on_delete=models.CASCADE, related_name='feasibility_assessments')
    youth = models.ForeignKey('youth.YouthProfile', on_delete=models.CASCADE, related_name='feasibility_assessments')
    assessment_date = models.DateTimeField(default=timezone.now)
    assessment_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='feasibility_assessments')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Draft')
    overall_feasibility_percentage = models.DecimalField(
        max_digits=5, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00')), MaxValueValidator(Decimal('100.00'))]
    )

    # 1. Location & structure
    planned_business_location = models.TextField(blank=True, default='')
    is_ground_rent_required = models.BooleanField(default=False)
    has_structure_or_stall = models.BooleanField(default=False)
    structure_needs = models.TextField(blank=True, default='')
    estimated_space_cost = money_field()
    space_cost_contribution = money_field()

    # 2. Equipment
    equipment_needed = models.JSONField(default=list, blank=True)
    equipment_currently_owned = models.JSONField(default=list, blank=True)
    equipment_missing = models.JSONField(default=list, blank=True)
    equipment_total_cost = money_field()
    equipment_cost_contribution = money_field()

    # 3. Supplies
    startup_supplies_needed = models.JSONField(default=list, blank=True)
    supplies_currently_owned = models.JSONField(default=list, blank=True)
    supplies_missing = models.JSONField(default=list, blank=True)
    supplies_total_cost = money_field()
    supplies_cost_contribution = money_field()

    # 4. Marketing
    marketing_tools_needed = models.JSONField(default=list, blank=True)
    marketing_tools_currently_owned = models.JSONField(default=list, blank=True)
    marketing_tools_missing = models.JSONField(default=list, blank=True)
    marketing_total_cost = money_field()
    marketing_cost_contribution = money_field()

    # 5. Delivery
    needs_delivery = models.BooleanField(default=False)
    delivery_method = models.TextField(blank=True, default='')
    delivery_resources_available = models.TextField(blank=True, default='')
    delivery_setup_cost = money_field()
    delivery_cost_contribution = money_field()

    # 6. Livelihood expenses
    monthly_non_business_expenses = money_field()
    fixed_financial_obligations = models.TextField(blank=True, default='')

    # 7. Revenue & projections
    expected_price = money_field()
    expected_sales_daily = money_field()
    expected_sales_weekly = money_field()
    expected_sales_monthly = money_field()
    expected_monthly_revenue = money_field()
    expected_monthly_expenditure = money_field()
    expected_monthly_savings = money_field()
    expected_pay_to_self = money_field()
    is_plan_feasible = models.BooleanField(default=False)
    plan_adjustments = models.TextField(blank=True, default='')

    # 8. Seed capital
    seed_capital_needed = money_field()
    seed_capital_usage = models.TextField(blank=True, default='')

    # Review
    reviewed_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='reviewed_assessments')
    review_date = models.DateTimeField(blank=True, null=True)
    review_comments = models.TextField(blank=True, default='')
    recommendations = models.TextField(blank=True, default='')
    risk_factors = models.TextField(blank=True, default='')
    growth_opportunities = models.TextField(blank=True, default='')
    recommended_actions = models.TextField(blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Assessment #{self.pk} ({self.business}, {self.status})"

    @property
    def total_startup_cost(self):
        return (self.estimated_space_cost + self.equipment_total_cost + self.supplies_total_cost
                + self.marketing_total_cost + self.delivery_setup_cost)

    @property
    def total_contribution(self):
        return (self.space_cost_contribution + self.equipment_cost_contribution + self.supplies_cost_contribution
                + self.marketing_cost_contribution + self.delivery_cost_contribution)

    class Meta:
        db_table = 'feasibility_assessments'
        ordering = ['-assessment_date']
