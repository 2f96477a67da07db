import logging

import knife_vagrant as kv

kv.init_logging(level=logging.INFO)

chef_conf = kv.ChefConfiguration.from_file("~/.chef/knife.yml")

conf = kv.Configuration.from_dictionary(
    {
        "box": "bento/ubuntu-22.04",
        "box_url": "",
        "hostname": "web-test",
        "memsize": 2048,
        "run_list": ["recipe[nginx]", "role[web]"],
        "chef_loglevel": "debug",
        "config_extra": 'config.vm.synced_folder ".", "/vagrant", disabled: true',
        # destroy the box and delete the chef objects at the end
        "destroy": True,
        "yes": True,
    }
)

kv.VagrantTest(conf, chef_conf).run()
