from jpform.postal.dataset import PostalDataset, load_bundled_dataset
from jpform.postal.resolvers import (
    ApiResolver,
    BundledResolver,
    CustomResolveFunction,
    CustomResolver,
    PostalResolver,
    bundled_resolver,
    create_api_resolver,
    create_custom_resolver,
    resolve_postal_code,
)
from jpform.postal.types import Address
