website_config_path = 'websiteConfig'

contact_messages_path = 'contactMessages'
contact_message_path = 'contactMessages/{message_id}'

reservations_path = 'reservations'
reservation_path = 'reservations/{reservation_id}'

backups_path = 'backups'
backup_path = 'backups/{backup_id}'

admin_profile_display_name_path = 'adminProfiles/{user_id}/displayName'

# DynamoDB single table layout: partkey is the first path segment,
# sortkey the second one (or singleton_sk for single-document paths)
singleton_sk = '#'
singleton_paths = (website_config_path,)
