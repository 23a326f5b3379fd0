from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from backend.core.models import DARE_MODEL_CHOICES, DISTRICT_CHOICES, normalize_district


def current_year():
    return timezone.now().year


class BusinessProfile(models.Model):
    REGISTRATION_STATUS_CHOICES = [
        ('Registered', 'Registered'),
        ('Unregistered', 'Unregistered'),
    ]
    ENTERPRISE_TYPE_CHOICES = [
        ('Sole Proprietorship', 'Sole Proprietorship'),
        ('Partnership', 'Partnership'),
        ('Limited Liability Company', 'Limited Liability Company'),
        ('Cooperative', 'Cooperative'),
        ('Social Enterprise', 'Social Enterprise'),
        ('Other', 'Other'),
    ]
    ENTERPRISE_SIZE_CHOICES = [
        ('Micro', 'Micro'),
        ('Small', 'Small'),
        ('Medium', 'Medium'),
        ('Large', 'Large'),
    ]
    SECTOR_CHOICES = [(s, s) for s in [
        'Agriculture', 'Manufacturing', 'Construction', 'Retail', 'Food & Beverage',
        'Fashion & Apparel', 'Beauty & Wellness', 'ICT', 'Creative Arts', 'Education',
        'Healthcare', 'Professional Services', 'Tourism & Hospitality', 'Digital Economy',
        'Climate Adaptation & Resilience', 'Finance / Financial Services', 'Other',
    ]]
    PAYMENT_STRUCTURE_CHOICES = [
        ('Self-Pay', 'Self-Pay'),
        ('Reinvestment', 'Reinvestment'),
        ('Savings', 'Savings'),
    ]

    business_name = models.CharField(max_length=255)
    business_logo = models.CharField(max_length=500, blank=True, null=True)
    district = models.CharField(max_length=50, choices=DISTRICT_CHOICES, blank=True, null=True)
    business_location = models.CharField(max_length=255, blank=True, null=True)
    business_contact = models.CharField(max_length=100, blank=True, null=True)
    business_description = models.TextField(blank=True, null=True)
    business_model = models.TextField(blank=True, null=True)
    dare_model = models.CharField(max_length=20, choices=DARE_MODEL_CHOICES, blank=True, null=True)
    business_start_date = models.DateField(blank=True, null=True)
    registration_status = models.CharField(max_length=20, choices=REGISTRATION_STATUS_CHOICES, default='Unregistered')
    registration_number = models.CharField(max_length=100, blank=True, null=True)
    registration_date = models.DateField(blank=True, null=True)
    business_objectives = models.JSONField(default=list, blank=True)
    short_term_goals = models.JSONField(default=list, blank=True)
    target_market = models.TextField(blank=True, null=True)
    tax_identification_number = models.CharField(max_length=100, blank=True, null=True)

    # Enterprise details
    implementing_partner_name = models.CharField(max_length=255, blank=True, null=True)
    enterprise_unique_identifier = models.CharField(max_length=100, blank=True, null=True)
    enterprise_owner_name = models.CharField(max_length=255, blank=True, null=True)
    enterprise_type = models.CharField(max_length=50, choices=ENTERPRISE_TYPE_CHOICES, blank=True, null=True)
    enterprise_size = models.CharField(max_length=20, choices=ENTERPRISE_SIZE_CHOICES, blank=True, null=True)
    sector = models.CharField(max_length=50, choices=SECTOR_CHOICES, blank=True, null=True)
    total_youth_in_work_reported = models.IntegerField(default=0, validators=[MinValueValidator(0)])
    youth_refugee_count = models.IntegerField(default=0, validators=[MinValueValidator(0)])
    youth_idp_count = models.IntegerField(default=0, validators=[MinValueValidator(0)])
    youth_host_community_count = models.IntegerField(default=0, validators=[MinValueValidator(0)])
    youth_plwd_count = models.IntegerField(default=0, validators=[MinValueValidator(0)])

    # Contact
    primary_phone_number = models.CharField(max_length=30, blank=True, null=True)
    additional_phone_number_1 = models.CharField(max_length=30, blank=True, null=True)
    business_email = models.EmailField(blank=True, null=True)
    country = models.CharField(max_length=100, default='Ghana')

    # Program details
    partner_start_date = models.DateField(blank=True, null=True)
    program_name = models.CharField(max_length=255, blank=True, null=True)
    program_contact_person = models.CharField(max_length=255, blank=True, null=True)

    # Projections
    delivery_setup = models.BooleanField(default=False)
    delivery_type = models.CharField(max_length=100, blank=True, null=True)
    expected_weekly_revenue = models.IntegerField(blank=True, null=True)
    expected_monthly_revenue = models.IntegerField(blank=True, null=True)
    anticipated_monthly_expenditure = models.IntegerField(blank=True, null=True)
    expected_monthly_profit = models.IntegerField(blank=True, null=True)
    payment_structure = models.CharField(max_length=20, choices=PAYMENT_STRUCTURE_CHOICES, blank=True, null=True)
    social_media_links = models.TextField(blank=True, null=True)

    youth = models.ManyToManyField('youth.YouthProfile', through='BusinessYouthRelationship', related_name='businesses', blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.business_name

    def save(self, *args, **kwargs):
        self.district = normalize_district(self.district)
        super().save(*args, **kwargs)

    class Meta:
        db_table = 'business_profiles'
        ordering = ['business_name']
        indexes = [
            models.Index(fields=['district'], name='business_pr_distric_7d2e05_idx'),
        ]


class BusinessYouthRelationship(models.Model):
    ROLE_CHOICES = [
        ('Owner', 'Owner'),
        ('Member', 'Member'),
        ('Partner', 'Partner'),
    ]

    business = models.ForeignKey(BusinessProfile, on_delete=models.CASCADE, related_name='youth_relationships')
    youth = models.ForeignKey('youth.YouthProfile', on_delete=models.CASCADE, related_name='business_relationships')
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='Member')
    join_date = models.DateField(default=timezone.localdate)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.youth} @ {self.business} ({self.role})"

    class Meta:
        db_table = 'business_youth_relationships'
        unique_together = [['business', 'youth']]


class BusinessTracking(models.Model):
    """Periodic performance record for a business"""
    PERIOD_CHOICES = [
        ('weekly', 'Weekly'),
        ('monthly', 'Monthly'),
        ('quarterly', 'Quarterly'),
        ('semi_annual', 'Semi-Annual'),
        ('annual', 'Annual'),
    ]

    business = models.ForeignKey(BusinessProfile, on_delete=models.CASCADE, related_name='tracking_records')
    recorded_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='tracking_records')
    mentor = models.ForeignKey('mentors.Mentor', on_delete=models.SET_NULL, null=True, blank=True, related_name='tracking_records')

    tracking_date = models.DateField(default=timezone.localdate)
    tracking_month = models.DateField(default=timezone.localdate)
    tracking_year = models.IntegerField(default=current_year)
    tracking_period = models.CharField(max_length=20, choices=PERIOD_CHOICES, default='monthly')

    # Revenue
    projected_revenue = models.IntegerField(blank=True, null=True)
    actual_revenue = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    internal_revenue = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    external_revenue = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    actual_expenditure = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    actual_profit = models.IntegerField(blank=True, null=True)

    # Employees
    projected_employees = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    actual_employees = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    new_employees = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    permanent_employees = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    temporary_employees = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    male_employees = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    female_employees = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    contract_workers = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])
    client_count = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(0)])

    prominent_market = models.CharField(max_length=255, blank=True, null=True)
    mentor_feedback = models.TextField(blank=True, null=True)
    business_insights = models.TextField(blank=True, null=True)
    performance_rating = models.IntegerField(blank=True, null=True, validators=[MinValueValidator(1), MaxValueValidator(5)])

    # Verification
    is_verified = models.BooleanField(default=False)
    verified_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='verified_tracking_records')
    verification_date = models.DateTimeField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.business} - {self.tracking_date}"

    class Meta:
        db_table = 'business_tracking'
        ordering = ['-tracking_date', '-id']
        indexes = [
            models.Index(fields=['business', 'tracking_date'], name='business_tr_busines_c48a19_idx'),
        ]


class BusinessTrackingAttachment(models.Model):
    tracking = models.ForeignKey(BusinessTracking, on_delete=models.CASCADE, related_name='attachments')
    attachment_name = models.CharField(max_length=255)
    attachment_type = models.CharField(max_length=100)
    attachment_url = models.CharField(max_length=500)
    uploaded_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, related_name='tracking_attachments')
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.attachment_name

    class Meta:
        db_table = 'business_tracking_attachments'
        ordering = ['-created_at']


class BusinessResource(models.Model):
    CATEGORY_CHOICES = [
        ('Tool', 'Tool'),
        ('Equipment', 'Equipment'),
        ('Material', 'Material'),
        ('Supply', 'Supply'),
    ]
    STATUS_CHOICES = [
        ('Available', 'Available'),
        ('In Use', 'In Use'),
        ('Maintenance', 'Maintenance'),
        ('Out of Stock', 'Out of Stock'),
    ]

    business = models.ForeignKey(BusinessProfile, on_delete=models.CASCADE, related_name='resources')
    name = models.CharField(max_length=255)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    description = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Available')
    quantity = models.IntegerField(default=1, validators=[MinValueValidator(0)])
    acquisition_date = models.DateField(blank=True, null=True)
    unit_cost = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True, validators=[MinValueValidator(Decimal('0.00'))])
    total_cost = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    supplier = models.CharField(max_length=255, blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='business_resources')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.name} ({self.business})"

    def save(self, *args, **kwargs):
        if self.unit_cost is not None:
            self.total_cost = Decimal(self.unit_cost) * (self.quantity or 0)
        else:
            self.total_cost = None
        super().save(*args, **kwargs)

    class Meta:
        db_table = 'business_resources'
        ordering = ['name']
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gte=0), name='business_resource_quantity_non_negative'),
        ]


class BusinessResourceCost(models.Model):
    COST_TYPE_CHOICES = [
        ('Purchase', 'Purchase'),
        ('Maintenance', 'Maintenance'),
        ('Repair', 'Repair'),
        ('Upgrade', 'Upgrade'),
        ('Other', 'Other'),
    ]

    resource = models.ForeignKey(BusinessResource, on_delete=models.CASCADE, related_name='costs')
    cost_type = models.CharField(max_length=20, choices=COST_TYPE_CHOICES)
    amount = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])
    date = models.DateField(default=timezone.localdate)
    description = models.TextField(blank=True, null=True)
    receipt = models.CharField(max_length=500, blank=True, null=True)
    recorded_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='resource_costs')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.cost_type} {self.amount} ({self.resource})"

    class Meta:
        db_table = 'business_resource_costs'
        ordering = ['-date']
