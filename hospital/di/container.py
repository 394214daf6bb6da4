# Standard library imports
from typing import Optional

# Local application imports
from hospital.core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    AppointmentProvider,
    DoctorProvider,
    ExaminationProvider,
    NotificationProvider,
    PatientProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Repositories and notification adapter (RepositoryProvider, NotificationProvider)
    2. Doctor and patient services (DoctorProvider, PatientProvider) - depend on repositories
    3. Appointment and examination services - depend on the services above
    
    Each container owns its own repositories, so two containers never share
    state. The application keeps exactly one on ``app.state.container``.
    """
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: repositories → domain services → application services
        """
        self.register_singleton(Settings, self.settings)
        
        # Step 1: Register storage and outbound adapters (foundation)
        RepositoryProvider.register(self)
        NotificationProvider.register(self)
        
        # Step 2: Register services (depend on repositories)
        DoctorProvider.register(self)
        PatientProvider.register(self)
        
        # Step 3: Register orchestration (depends on services)
        AppointmentProvider.register(self)
        ExaminationProvider.register(self)
