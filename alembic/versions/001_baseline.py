"""001_baseline

Baseline schema: users and driver_profiles.

Unique constraints are named explicitly; the application maps these names
to field-level duplicate errors.

Revision ID: 0001
Revises: (none)
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ------------------------------------------------------------------
    # Extensions
    # ------------------------------------------------------------------
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')
    op.execute('CREATE EXTENSION IF NOT EXISTS "postgis"')

    # ------------------------------------------------------------------
    # Enum types
    # ------------------------------------------------------------------
    op.execute("CREATE TYPE user_role AS ENUM ('RIDER', 'DRIVER')")
    op.execute(
        "CREATE TYPE language_preference AS ENUM "
        "('HINDI', 'ENGLISH', 'MARATHI', 'TAMIL', 'TELUGU', 'KANNADA', 'BENGALI', 'GUJARATI')"
    )
    op.execute(
        "CREATE TYPE city AS ENUM "
        "('MUMBAI', 'DELHI', 'BANGALORE', 'HYDERABAD', 'CHENNAI', 'KOLKATA', 'PUNE', 'AHMEDABAD')"
    )
    op.execute(
        "CREATE TYPE vehicle_type AS ENUM "
        "('CAR', 'BIKE', 'AUTO', 'E_RICKSHAW', 'ELECTRIC_SCOOTER')"
    )

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    # --- users ---
    op.execute("""
        CREATE TABLE users (
            id UUID DEFAULT uuid_generate_v4(),
            name VARCHAR(50) NOT NULL,
            email VARCHAR(255) NOT NULL,
            phone VARCHAR(10) NOT NULL,
            hashed_password VARCHAR(255) NOT NULL,
            role user_role NOT NULL DEFAULT 'RIDER',
            is_active BOOLEAN NOT NULL DEFAULT TRUE,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            CONSTRAINT pk_users PRIMARY KEY (id),
            CONSTRAINT uq_users_email UNIQUE (email),
            CONSTRAINT uq_users_phone UNIQUE (phone)
        )
    """)

    # --- driver_profiles ---
    op.execute("""
        CREATE TABLE driver_profiles (
            id UUID DEFAULT uuid_generate_v4(),
            user_id UUID NOT NULL,
            language_preference language_preference NOT NULL,
            city city NOT NULL,
            profile_picture_url VARCHAR(2048),
            national_id_encrypted VARCHAR(255) NOT NULL,
            national_id_digest VARCHAR(64) NOT NULL,
            license_number VARCHAR(20) NOT NULL,
            license_expiry DATE,
            rc_number VARCHAR(15) NOT NULL,
            rc_expiry DATE,
            vehicle_type vehicle_type NOT NULL,
            vehicle_number VARCHAR(12),
            vehicle_model VARCHAR(50),
            vehicle_color VARCHAR(20),
            is_online BOOLEAN NOT NULL DEFAULT FALSE,
            is_verified BOOLEAN NOT NULL DEFAULT FALSE,
            completion_percentage INTEGER NOT NULL DEFAULT 0,
            rating NUMERIC(2, 1) NOT NULL DEFAULT 5.0,
            total_rides INTEGER NOT NULL DEFAULT 0,
            longitude NUMERIC(10, 7) NOT NULL DEFAULT 0,
            latitude NUMERIC(10, 7) NOT NULL DEFAULT 0,
            location GEOGRAPHY(POINT, 4326),
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
            CONSTRAINT pk_driver_profiles PRIMARY KEY (id),
            CONSTRAINT fk_driver_profiles_user_id_users
                FOREIGN KEY (user_id) REFERENCES users (id) ON DELETE CASCADE,
            CONSTRAINT uq_driver_profiles_user_id UNIQUE (user_id),
            CONSTRAINT uq_driver_profiles_national_id_digest UNIQUE (national_id_digest),
            CONSTRAINT uq_driver_profiles_license_number UNIQUE (license_number),
            CONSTRAINT uq_driver_profiles_rc_number UNIQUE (rc_number),
            CONSTRAINT ck_driver_profiles_rating_range CHECK (rating >= 1 AND rating <= 5),
            CONSTRAINT ck_driver_profiles_total_rides_non_negative CHECK (total_rides >= 0),
            CONSTRAINT ck_driver_profiles_completion_range
                CHECK (completion_percentage >= 0 AND completion_percentage <= 100)
        )
    """)
    op.execute(
        "CREATE INDEX idx_driver_profiles_location ON driver_profiles USING GIST (location)"
    )

    # ------------------------------------------------------------------
    # updated_at triggers
    # ------------------------------------------------------------------
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = CURRENT_TIMESTAMP;
            RETURN NEW;
        END;
        $$ language 'plpgsql'
    """)
    for table in ("users", "driver_profiles"):
        op.execute(f"""
            CREATE TRIGGER update_{table}_updated_at
            BEFORE UPDATE ON {table}
            FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
        """)


def downgrade() -> None:
    for table in ("users", "driver_profiles"):
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")

    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    op.execute("DROP TABLE IF EXISTS driver_profiles CASCADE")
    op.execute("DROP TABLE IF EXISTS users CASCADE")

    op.execute("DROP TYPE IF EXISTS vehicle_type")
    op.execute("DROP TYPE IF EXISTS city")
    op.execute("DROP TYPE IF EXISTS language_preference")
    op.execute("DROP TYPE IF EXISTS user_role")
