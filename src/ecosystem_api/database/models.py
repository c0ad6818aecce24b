"""
Database models for the Ecosystem API (authoritative table definitions).

Each model's ``__tablename__`` is the collection name used by the record
store and the relationship catalogue.
"""

from sqlalchemy import (
    Boolean,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models."""

    metadata = MetaData(naming_convention=naming_convention)


class CoreUnits(Base):
    __tablename__ = "core_units"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    code: Mapped[str | None] = mapped_column(String(32))
    name: Mapped[str | None] = mapped_column(String(255))
    image: Mapped[str | None] = mapped_column(Text)
    # Stored as a bracket-wrapped comma list, e.g. "{Technical,Growth}"
    category: Mapped[str | None] = mapped_column(String(255))
    sentence_description: Mapped[str | None] = mapped_column(Text)
    paragraph_description: Mapped[str | None] = mapped_column(Text)
    paragraph_image: Mapped[str | None] = mapped_column(Text)
    short_code: Mapped[str | None] = mapped_column(String(16))


class CuMips(Base):
    __tablename__ = "cu_mips"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    cu_id: Mapped[int | None] = mapped_column(ForeignKey("core_units.id"))
    mip_code: Mapped[str | None] = mapped_column(String(64))
    mip_title: Mapped[str | None] = mapped_column(Text)
    mip_status: Mapped[str | None] = mapped_column(String(32))
    mip_url: Mapped[str | None] = mapped_column(Text)
    forum_url: Mapped[str | None] = mapped_column(Text)
    accepted: Mapped[str | None] = mapped_column(String(32))


class SocialMediaChannels(Base):
    __tablename__ = "social_media_channels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    cu_id: Mapped[int | None] = mapped_column(ForeignKey("core_units.id"))
    forum_tag: Mapped[str | None] = mapped_column(Text)
    twitter: Mapped[str | None] = mapped_column(Text)
    youtube: Mapped[str | None] = mapped_column(Text)
    discord: Mapped[str | None] = mapped_column(Text)
    linked_in: Mapped[str | None] = mapped_column(Text)
    website: Mapped[str | None] = mapped_column(Text)


class ContributorCommitments(Base):
    __tablename__ = "contributor_commitments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    cu_id: Mapped[int | None] = mapped_column(ForeignKey("core_units.id"))
    cu_code: Mapped[str | None] = mapped_column(String(32))
    contributor_id: Mapped[int | None] = mapped_column(Integer)
    start_date: Mapped[str | None] = mapped_column(String(32))
    commitment: Mapped[str | None] = mapped_column(String(16))


class CuGithubContributions(Base):
    __tablename__ = "cu_github_contributions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    cu_id: Mapped[int | None] = mapped_column(ForeignKey("core_units.id"))
    org_id: Mapped[int | None] = mapped_column(Integer)
    repo_id: Mapped[int | None] = mapped_column(Integer)


class BudgetStatements(Base):
    __tablename__ = "budget_statements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    cu_id: Mapped[int | None] = mapped_column(ForeignKey("core_units.id"))
    cu_code: Mapped[str | None] = mapped_column(String(32))
    month: Mapped[str | None] = mapped_column(String(32))
    comments: Mapped[str | None] = mapped_column(Text)
    budget_status: Mapped[str | None] = mapped_column(String(32))
    publication_url: Mapped[str | None] = mapped_column(Text)


class BudgetStatementFtes(Base):
    __tablename__ = "budget_statement_ftes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    budget_statement_id: Mapped[int | None] = mapped_column(ForeignKey("budget_statements.id"))
    month: Mapped[str | None] = mapped_column(String(32))
    ftes: Mapped[float | None] = mapped_column(Float)


class BudgetStatementMkrVests(Base):
    __tablename__ = "budget_statement_mkr_vests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    budget_statement_id: Mapped[int | None] = mapped_column(ForeignKey("budget_statements.id"))
    vesting_date: Mapped[str | None] = mapped_column(String(32))
    mkr_amount: Mapped[float | None] = mapped_column(Float)
    mkr_amount_old: Mapped[float | None] = mapped_column(Float)
    comments: Mapped[str | None] = mapped_column(Text)


class BudgetStatementWallets(Base):
    __tablename__ = "budget_statement_wallets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    budget_statement_id: Mapped[int | None] = mapped_column(ForeignKey("budget_statements.id"))
    name: Mapped[str | None] = mapped_column(String(255))
    address: Mapped[str | None] = mapped_column(String(255))
    current_balance: Mapped[float | None] = mapped_column(Float)
    topup_transfer: Mapped[float | None] = mapped_column(Float)
    comments: Mapped[str | None] = mapped_column(Text)


class BudgetStatementLineItems(Base):
    __tablename__ = "budget_statement_line_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    budget_statement_wallet_id: Mapped[int | None] = mapped_column(
        ForeignKey("budget_statement_wallets.id")
    )
    month: Mapped[str | None] = mapped_column(String(32))
    position: Mapped[int | None] = mapped_column(Integer)
    group: Mapped[str | None] = mapped_column(String(255))
    budget_category: Mapped[str | None] = mapped_column(String(255))
    forecast: Mapped[float | None] = mapped_column(Float)
    actual: Mapped[float | None] = mapped_column(Float)
    comments: Mapped[str | None] = mapped_column(Text)
    canonical_budget_category: Mapped[str | None] = mapped_column(String(255))
    headcount_expense: Mapped[bool | None] = mapped_column(Boolean)


class BudgetStatementPayments(Base):
    __tablename__ = "budget_statement_payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    budget_statement_wallet_id: Mapped[int | None] = mapped_column(
        ForeignKey("budget_statement_wallets.id")
    )
    transaction_date: Mapped[str | None] = mapped_column(String(32))
    transaction_id: Mapped[str | None] = mapped_column(String(255))
    budget_statement_line_item_id: Mapped[int | None] = mapped_column(Integer)
    comments: Mapped[str | None] = mapped_column(Text)


class Roadmaps(Base):
    __tablename__ = "roadmaps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Null owner means a cross core unit initiative
    owner_cu_id: Mapped[int | None] = mapped_column(ForeignKey("core_units.id"))
    roadmap_code: Mapped[str | None] = mapped_column(String(64))
    roadmap_name: Mapped[str | None] = mapped_column(String(255))
    comments: Mapped[str | None] = mapped_column(Text)
    roadmap_status: Mapped[str | None] = mapped_column(String(32))
    strategic_initiative: Mapped[bool | None] = mapped_column(Boolean)
    roadmap_summary: Mapped[str | None] = mapped_column(Text)


class Stakeholders(Base):
    __tablename__ = "stakeholders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255))
    stakeholder_contributor_id: Mapped[int | None] = mapped_column(Integer)
    stakeholder_cu_code: Mapped[str | None] = mapped_column(String(32))


class StakeholderRoles(Base):
    __tablename__ = "stakeholder_roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    stakeholder_role_name: Mapped[str] = mapped_column(String(255), nullable=False)


class RoadmapStakeholders(Base):
    __tablename__ = "roadmap_stakeholders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    stakeholder_id: Mapped[int] = mapped_column(ForeignKey("stakeholders.id"), nullable=False)
    roadmap_id: Mapped[int] = mapped_column(ForeignKey("roadmaps.id"), nullable=False)
    stakeholder_role_id: Mapped[int] = mapped_column(
        ForeignKey("stakeholder_roles.id"), nullable=False
    )


class Outputs(Base):
    __tablename__ = "outputs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255))
    output_url: Mapped[str | None] = mapped_column(Text)
    output_date: Mapped[str | None] = mapped_column(String(32))


class OutputTypes(Base):
    __tablename__ = "output_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    output_type: Mapped[str | None] = mapped_column(String(255))


class RoadmapOutputs(Base):
    __tablename__ = "roadmap_outputs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    output_id: Mapped[int | None] = mapped_column(ForeignKey("outputs.id"))
    roadmap_id: Mapped[int | None] = mapped_column(ForeignKey("roadmaps.id"))
    output_type_id: Mapped[int | None] = mapped_column(ForeignKey("output_types.id"))


class Tasks(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Set when this task is a sub task of another task
    parent_id: Mapped[int | None] = mapped_column(ForeignKey("tasks.id"))
    task_name: Mapped[str | None] = mapped_column(String(255))
    task_status: Mapped[str | None] = mapped_column(String(32))
    owner_stakeholder_id: Mapped[int | None] = mapped_column(ForeignKey("stakeholders.id"))
    start_date: Mapped[str | None] = mapped_column(String(32))
    target: Mapped[str | None] = mapped_column(String(32))
    completed_percentage: Mapped[float | None] = mapped_column(Float)
    confidence_level: Mapped[str | None] = mapped_column(String(16))
    comments: Mapped[str | None] = mapped_column(Text)


class Milestones(Base):
    __tablename__ = "milestones"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    roadmap_id: Mapped[int] = mapped_column(ForeignKey("roadmaps.id"), nullable=False)
    task_id: Mapped[int] = mapped_column(ForeignKey("tasks.id"), nullable=False)


class Reviews(Base):
    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    task_id: Mapped[int] = mapped_column(ForeignKey("tasks.id"), nullable=False)
    review_date: Mapped[str] = mapped_column(String(32), nullable=False)
    review_outcome: Mapped[str] = mapped_column(String(16), nullable=False)


class Users(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    # bcrypt hash, never the plaintext
    password: Mapped[str] = mapped_column(String(255), nullable=False)


class UserRoles(Base):
    __tablename__ = "user_roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    role_id: Mapped[int | None] = mapped_column(Integer)
    resource: Mapped[str | None] = mapped_column(String(64))
    resource_id: Mapped[int | None] = mapped_column(Integer)


class UserPermissions(Base):
    __tablename__ = "user_permissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    resource: Mapped[str] = mapped_column(String(64), nullable=False)
    permission: Mapped[str] = mapped_column(String(64), nullable=False)
